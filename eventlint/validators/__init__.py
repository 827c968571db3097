"""Validators for process event definitions."""

from .base import (
    Diagnostic,
    EventParams,
    ProblemCode,
    ProcessValidator,
    ValidationResult,
)
from .event_definitions import (
    EventDefinitionValidator,
    check_compensate_definition,
    check_event_definitions,
    check_link_definition,
    check_message_definition,
    check_signal_definition,
    check_timer_definition,
)
from .runner import DEFAULT_VALIDATORS, run_validators, validate_model_file

__all__ = [
    "Diagnostic",
    "EventParams",
    "ProblemCode",
    "ProcessValidator",
    "ValidationResult",
    "EventDefinitionValidator",
    "check_compensate_definition",
    "check_event_definitions",
    "check_link_definition",
    "check_message_definition",
    "check_signal_definition",
    "check_timer_definition",
    "DEFAULT_VALIDATORS",
    "run_validators",
    "validate_model_file",
]
