"""Event definition validator.

Checks that every event definition in a process is configured well enough
to deploy: messages and signals are referenced (and the references exist),
timers have a schedule, compensation targets resolve, and link events are
wired to a target or a source.
"""

import logging
from typing import assert_never

from ..graph.model_graph import ModelGraph
from ..schema.models import (
    CompensateEventDefinition,
    FlowElement,
    LinkEventDefinition,
    MessageEventDefinition,
    OtherEventDefinition,
    SignalEventDefinition,
    TimerEventDefinition,
)
from .base import Diagnostic, EventParams, ProblemCode, ValidationResult

logger = logging.getLogger(__name__)


def _is_empty(value: str | None) -> bool:
    return value is None or value == ""


def _diagnostic(
    code: ProblemCode,
    process_id: str,
    event: FlowElement,
    params: EventParams | None = None,
) -> Diagnostic:
    return Diagnostic(
        code=code,
        process_id=process_id,
        event_id=event.id,
        event_name=event.name or None,
        params=params,
    )


def check_message_definition(
    graph: ModelGraph,
    process_id: str,
    event: FlowElement,
    definition: MessageEventDefinition,
) -> list[Diagnostic]:
    """A message event needs a resolvable messageRef or a messageExpression."""
    if _is_empty(definition.message_ref):
        if _is_empty(definition.message_expression):
            return [
                _diagnostic(
                    ProblemCode.MESSAGE_EVENT_MISSING_MESSAGE_REF, process_id, event
                )
            ]
    elif not graph.contains_message_id(definition.message_ref):
        return [
            _diagnostic(ProblemCode.MESSAGE_EVENT_INVALID_MESSAGE_REF, process_id, event)
        ]
    return []


def check_signal_definition(
    graph: ModelGraph,
    process_id: str,
    event: FlowElement,
    definition: SignalEventDefinition,
) -> list[Diagnostic]:
    """A signal event needs a resolvable signalRef or a signalExpression."""
    if _is_empty(definition.signal_ref):
        if _is_empty(definition.signal_expression):
            return [
                _diagnostic(ProblemCode.SIGNAL_EVENT_MISSING_SIGNAL_REF, process_id, event)
            ]
    elif not graph.contains_signal_id(definition.signal_ref):
        return [
            _diagnostic(ProblemCode.SIGNAL_EVENT_INVALID_SIGNAL_REF, process_id, event)
        ]
    return []


def check_timer_definition(
    graph: ModelGraph,
    process_id: str,
    event: FlowElement,
    definition: TimerEventDefinition,
) -> list[Diagnostic]:
    """A timer needs a date, a cycle or a duration.

    The value itself is not parsed here.
    """
    if (
        _is_empty(definition.time_date)
        and _is_empty(definition.time_cycle)
        and _is_empty(definition.time_duration)
    ):
        return [
            _diagnostic(ProblemCode.EVENT_TIMER_MISSING_CONFIGURATION, process_id, event)
        ]
    return []


def check_compensate_definition(
    graph: ModelGraph,
    process_id: str,
    event: FlowElement,
    definition: CompensateEventDefinition,
) -> list[Diagnostic]:
    """A compensation activityRef, when given, must name an element of the process.

    Without an activityRef the default compensation scope applies, which is
    always valid.
    """
    if _is_empty(definition.activity_ref):
        return []
    if graph.resolve_element(process_id, definition.activity_ref, recursive=True) is None:
        return [
            _diagnostic(
                ProblemCode.COMPENSATE_EVENT_INVALID_ACTIVITY_REF, process_id, event
            )
        ]
    return []


def check_link_definition(
    graph: ModelGraph,
    process_id: str,
    event: FlowElement,
    definition: LinkEventDefinition,
) -> list[Diagnostic]:
    """A throwing link needs a target and a catching link needs sources.

    Throw and catch are checked independently, so an event flagged as both
    can report both problems. The code and parameters depend on whether the
    event has a name.
    """
    diagnostics = []
    named = not _is_empty(event.name)
    params = EventParams(event.id, event.name if named else None)

    if event.is_link_throw_event and _is_empty(definition.target):
        code = (
            ProblemCode.LINK_EVENT_DEFINITION_MISSING_TARGET
            if named
            else ProblemCode.LINK_EVENT_DEFINITION_MISSING_TARGET_EMPTY_NAME
        )
        diagnostics.append(_diagnostic(code, process_id, event, params))

    if event.is_link_catch_event and not definition.sources:
        code = (
            ProblemCode.LINK_EVENT_DEFINITION_MISSING_SOURCE
            if named
            else ProblemCode.LINK_EVENT_DEFINITION_MISSING_SOURCE_EMPTY_NAME
        )
        diagnostics.append(_diagnostic(code, process_id, event, params))

    return diagnostics


def check_event_definitions(graph: ModelGraph, process_id: str) -> ValidationResult:
    """Check every event definition of every event in a process.

    Events nested in sub-processes are included. Each definition is checked
    by the rule for its kind; kinds without a rule are skipped. Diagnostics
    are returned in event order, then definition order.

    Args:
        graph: The process graph.
        process_id: The process to check.

    Returns:
        ValidationResult with one diagnostic per problem found.

    Raises:
        UnknownProcessError: If the process is not in the graph.
    """
    result = ValidationResult()
    events = graph.events_of(process_id)
    logger.debug("Checking %d event(s) in process '%s'", len(events), process_id)

    for event in events:
        for definition in graph.definitions_of(event):
            match definition:
                case MessageEventDefinition():
                    found = check_message_definition(graph, process_id, event, definition)
                case SignalEventDefinition():
                    found = check_signal_definition(graph, process_id, event, definition)
                case TimerEventDefinition():
                    found = check_timer_definition(graph, process_id, event, definition)
                case CompensateEventDefinition():
                    found = check_compensate_definition(
                        graph, process_id, event, definition
                    )
                case LinkEventDefinition():
                    found = check_link_definition(graph, process_id, event, definition)
                case OtherEventDefinition():
                    found = []
                case _:
                    assert_never(definition)

            for diagnostic in found:
                logger.debug("%s", diagnostic)
            result.extend(found)

    return result


class EventDefinitionValidator:
    """ProcessValidator adapter for :func:`check_event_definitions`."""

    name = "event-definitions"

    def validate(self, graph: ModelGraph, process_id: str) -> ValidationResult:
        return check_event_definitions(graph, process_id)
