"""Schema layer for loading process definitions."""

from .errors import (
    ModelError,
    SchemaLoadError,
    SchemaValidationError,
    UnknownProcessError,
)
from .models import (
    CompensateEventDefinition,
    EventDefinition,
    FlowElement,
    LinkEventDefinition,
    Message,
    MessageEventDefinition,
    OtherEventDefinition,
    Process,
    ProcessModel,
    Signal,
    SignalEventDefinition,
    TimerEventDefinition,
)
from .loader import load_yaml, parse_model, parse_model_data, parse_model_from_string

__all__ = [
    "ModelError",
    "SchemaLoadError",
    "SchemaValidationError",
    "UnknownProcessError",
    "CompensateEventDefinition",
    "EventDefinition",
    "FlowElement",
    "LinkEventDefinition",
    "Message",
    "MessageEventDefinition",
    "OtherEventDefinition",
    "Process",
    "ProcessModel",
    "Signal",
    "SignalEventDefinition",
    "TimerEventDefinition",
    "load_yaml",
    "parse_model",
    "parse_model_data",
    "parse_model_from_string",
]
