"""Node and edge type definitions for the process graph."""

from enum import Enum


class NodeType(str, Enum):
    """Types of nodes in the process graph."""

    PROCESS = "process"
    EVENT = "event"
    CONTAINER = "container"  # subProcess, transaction, ...
    ELEMENT = "element"  # any other flow element (tasks, gateways)
    MESSAGE = "message"
    SIGNAL = "signal"


class EdgeType(str, Enum):
    """Types of edges in the process graph."""

    CONTAINS = "contains"  # Process/Container -> FlowElement
