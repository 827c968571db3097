"""Diagnostic types and the validator interface."""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterator, Protocol

if TYPE_CHECKING:
    from ..graph.model_graph import ModelGraph


class ProblemCode(str, Enum):
    """Stable problem codes.

    Downstream renderers key their messages off these values; renaming one
    is a breaking change.
    """

    MESSAGE_EVENT_MISSING_MESSAGE_REF = "MESSAGE_EVENT_MISSING_MESSAGE_REF"
    MESSAGE_EVENT_INVALID_MESSAGE_REF = "MESSAGE_EVENT_INVALID_MESSAGE_REF"
    SIGNAL_EVENT_MISSING_SIGNAL_REF = "SIGNAL_EVENT_MISSING_SIGNAL_REF"
    SIGNAL_EVENT_INVALID_SIGNAL_REF = "SIGNAL_EVENT_INVALID_SIGNAL_REF"
    EVENT_TIMER_MISSING_CONFIGURATION = "EVENT_TIMER_MISSING_CONFIGURATION"
    COMPENSATE_EVENT_INVALID_ACTIVITY_REF = "COMPENSATE_EVENT_INVALID_ACTIVITY_REF"
    LINK_EVENT_DEFINITION_MISSING_TARGET = "LINK_EVENT_DEFINITION_MISSING_TARGET"
    LINK_EVENT_DEFINITION_MISSING_TARGET_EMPTY_NAME = (
        "LINK_EVENT_DEFINITION_MISSING_TARGET_EMPTY_NAME"
    )
    LINK_EVENT_DEFINITION_MISSING_SOURCE = "LINK_EVENT_DEFINITION_MISSING_SOURCE"
    LINK_EVENT_DEFINITION_MISSING_SOURCE_EMPTY_NAME = (
        "LINK_EVENT_DEFINITION_MISSING_SOURCE_EMPTY_NAME"
    )


@dataclass(frozen=True)
class EventParams:
    """Named parameters handed to message rendering."""

    event_id: str
    event_name: str | None = None

    def as_dict(self) -> dict[str, str]:
        """Render as the ``eventId``/``eventName`` mapping.

        ``eventName`` is only present when the event has a name.
        """
        params = {"eventId": self.event_id}
        if self.event_name is not None:
            params["eventName"] = self.event_name
        return params


@dataclass(frozen=True)
class Diagnostic:
    """A single validation finding attached to an event."""

    code: ProblemCode
    process_id: str
    event_id: str
    event_name: str | None = None
    params: EventParams | None = None

    @property
    def parameters(self) -> dict[str, str]:
        """The parameter mapping, empty when the code takes none."""
        if self.params is None:
            return {}
        return self.params.as_dict()

    def __str__(self) -> str:
        location = f"[{self.process_id}.{self.event_id}]"
        return f"ERROR: {self.code.value} {location}"


@dataclass
class ValidationResult:
    """Ordered, append-only collection of diagnostics."""

    diagnostics: list[Diagnostic] = field(default_factory=list)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.diagnostics)

    def __len__(self) -> int:
        return len(self.diagnostics)

    @property
    def errors(self) -> list[Diagnostic]:
        """Get all diagnostics; every finding is an error."""
        return list(self.diagnostics)

    @property
    def codes(self) -> list[ProblemCode]:
        """Problem codes in discovery order."""
        return [d.code for d in self.diagnostics]

    @property
    def has_errors(self) -> bool:
        return len(self.diagnostics) > 0

    @property
    def is_valid(self) -> bool:
        """Check if the model is valid (no errors)."""
        return not self.has_errors

    def add(self, diagnostic: Diagnostic) -> None:
        """Append a diagnostic."""
        self.diagnostics.append(diagnostic)

    def extend(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics.extend(diagnostics)

    def merge(self, other: "ValidationResult") -> None:
        """Merge another result into this one, keeping order."""
        self.diagnostics.extend(other.diagnostics)


class ProcessValidator(Protocol):
    """A validator that checks one process of a model at a time."""

    name: str

    def validate(self, graph: "ModelGraph", process_id: str) -> ValidationResult:
        ...
