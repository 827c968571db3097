"""Pydantic models for process definitions."""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

EVENT_TYPES = frozenset(
    {
        "startEvent",
        "endEvent",
        "intermediateCatchEvent",
        "intermediateThrowEvent",
        "boundaryEvent",
    }
)

CONTAINER_TYPES = frozenset(
    {
        "subProcess",
        "eventSubProcess",
        "transaction",
        "adHocSubProcess",
    }
)

# Shorthand key -> field receiving a scalar value, e.g. {message: orderPlaced}
SHORTHAND_REF_FIELDS = {
    "message": "messageRef",
    "signal": "signalRef",
    "compensate": "activityRef",
    "link": "target",
    "timer": None,
}


class MessageEventDefinition(BaseModel):
    """Event triggered by (or throwing) a message."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["message"] = "message"
    message_ref: str | None = Field(default=None, alias="messageRef")
    message_expression: str | None = Field(default=None, alias="messageExpression")


class SignalEventDefinition(BaseModel):
    """Event triggered by (or throwing) a signal."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["signal"] = "signal"
    signal_ref: str | None = Field(default=None, alias="signalRef")
    signal_expression: str | None = Field(default=None, alias="signalExpression")


class TimerEventDefinition(BaseModel):
    """Timer trigger; at most one of the three fields is normally set."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["timer"] = "timer"
    time_date: str | None = Field(default=None, alias="timeDate")
    time_cycle: str | None = Field(default=None, alias="timeCycle")
    time_duration: str | None = Field(default=None, alias="timeDuration")


class CompensateEventDefinition(BaseModel):
    """Compensation trigger, optionally naming the activity to compensate."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["compensate"] = "compensate"
    activity_ref: str | None = Field(default=None, alias="activityRef")


class LinkEventDefinition(BaseModel):
    """Link between a throwing and a catching intermediate event."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["link"] = "link"
    name: str | None = None
    target: str | None = None
    sources: frozenset[str] = Field(default_factory=frozenset)


class OtherEventDefinition(BaseModel):
    """A definition kind the model carries but no event rule inspects."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["error", "escalation", "terminate", "conditional", "cancel"]


EventDefinition = Annotated[
    Union[
        MessageEventDefinition,
        SignalEventDefinition,
        TimerEventDefinition,
        CompensateEventDefinition,
        LinkEventDefinition,
        OtherEventDefinition,
    ],
    Field(discriminator="type"),
]


def _normalize_definition(definition: Any) -> Any:
    """Expand shorthand definition syntax into the tagged form."""
    if isinstance(definition, str):
        return {"type": definition}

    if not isinstance(definition, dict) or "type" in definition:
        return definition

    for kind, ref_field in SHORTHAND_REF_FIELDS.items():
        if kind not in definition:
            continue
        rest = {k: v for k, v in definition.items() if k != kind}
        value = definition[kind]
        if isinstance(value, dict):
            return {"type": kind, **rest, **value}
        if value is None:
            return {"type": kind, **rest}
        if ref_field is None:
            # No field to put a scalar in; let validation report it
            return definition
        rest[ref_field] = value
        return {"type": kind, **rest}

    return definition


class FlowElement(BaseModel):
    """A node of a process: an event, an activity, a gateway or a container."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    type: str
    name: str | None = None
    definitions: list[EventDefinition] = Field(default_factory=list)
    elements: list["FlowElement"] = Field(default_factory=list)
    link_throw: bool | None = Field(default=None, alias="linkThrow")
    link_catch: bool | None = Field(default=None, alias="linkCatch")

    @model_validator(mode="before")
    @classmethod
    def normalize_element(cls, data: Any) -> Any:
        """Normalize shorthand definitions and null collections."""
        if not isinstance(data, dict):
            return data

        definitions = data.get("definitions")
        if definitions is None:
            data["definitions"] = []
        elif isinstance(definitions, list):
            data["definitions"] = [_normalize_definition(d) for d in definitions]
        else:
            # A single definition written without a list
            data["definitions"] = [_normalize_definition(definitions)]

        if data.get("elements") is None:
            data["elements"] = []

        return data

    @property
    def is_event(self) -> bool:
        return self.type in EVENT_TYPES

    @property
    def is_container(self) -> bool:
        return self.type in CONTAINER_TYPES

    @property
    def has_link_definition(self) -> bool:
        return any(isinstance(d, LinkEventDefinition) for d in self.definitions)

    @property
    def is_link_throw_event(self) -> bool:
        """Whether this event throws a link.

        An explicit ``linkThrow`` flag wins; otherwise an intermediate throw
        event carrying a link definition is a link-throw event.
        """
        if self.link_throw is not None:
            return self.link_throw
        return self.type == "intermediateThrowEvent" and self.has_link_definition

    @property
    def is_link_catch_event(self) -> bool:
        """Whether this event catches a link (see ``is_link_throw_event``)."""
        if self.link_catch is not None:
            return self.link_catch
        return self.type == "intermediateCatchEvent" and self.has_link_definition


class Message(BaseModel):
    """A message declared at model level."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str | None = None


class Signal(BaseModel):
    """A signal declared at model level."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str | None = None
    scope: Literal["global", "processInstance"] = "global"


class Process(BaseModel):
    """A process definition owning a tree of flow elements."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str | None = None
    elements: list[FlowElement] = Field(default_factory=list)


class ProcessModel(BaseModel):
    """Root model for a process definition file."""

    model_config = ConfigDict(frozen=True)

    messages: list[Message] = Field(default_factory=list)
    signals: list[Signal] = Field(default_factory=list)
    processes: list[Process] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def normalize_model(cls, data: Any) -> Any:
        """Allow messages and signals to be listed as bare ids."""
        if not isinstance(data, dict):
            return data

        for key in ("messages", "signals"):
            items = data.get(key)
            if items is None:
                data[key] = []
            elif isinstance(items, list):
                data[key] = [
                    {"id": item} if isinstance(item, str) else item
                    for item in items
                ]

        if data.get("processes") is None:
            data["processes"] = []

        return data

    def get_process(self, process_id: str) -> Process | None:
        """Get a process by id."""
        for process in self.processes:
            if process.id == process_id:
                return process
        return None

    def get_process_ids(self) -> list[str]:
        """Get all process ids in declaration order."""
        return [p.id for p in self.processes]
