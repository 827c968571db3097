"""ModelGraph wrapper around networkx for process models."""

from typing import Any, Iterator

import networkx as nx

from ..schema.errors import UnknownProcessError
from ..schema.models import EventDefinition, FlowElement
from .node_types import EdgeType, NodeType


def _process_node(process_id: str) -> str:
    return f"process:{process_id}"


class ModelGraph:
    """A read-only graph view of a process model.

    Wraps a networkx DiGraph whose ``contains`` edges mirror the nesting of
    processes, sub-processes and their flow elements. Element nodes are keyed
    by their position under the parent, so repeated element ids stay separate
    nodes. Messages and signals are standalone nodes used for model-wide
    existence checks.
    """

    def __init__(self):
        """Initialize an empty process graph."""
        self._graph = nx.DiGraph()
        # (process id, element id) -> element nodes in declaration order
        self._element_index: dict[tuple[str, str], list[str]] = {}

    @property
    def graph(self) -> nx.DiGraph:
        """Get the underlying networkx graph."""
        return self._graph

    # -------------------------------------------------------------------------
    # Node management
    # -------------------------------------------------------------------------

    def add_process(self, process_id: str, **attrs: Any) -> str:
        """Add a process node to the graph.

        Args:
            process_id: The process id.
            **attrs: Additional attributes for the node (e.g. name).

        Returns:
            The node ID.
        """
        node_id = _process_node(process_id)
        self._graph.add_node(
            node_id,
            node_type=NodeType.PROCESS,
            id=process_id,
            **attrs,
        )
        return node_id

    def add_element(
        self,
        process_id: str,
        element: FlowElement,
        parent_node: str | None = None,
    ) -> str:
        """Add a flow element under a process or a container element.

        Args:
            process_id: The owning process id.
            element: The flow element.
            parent_node: Node ID of the containing element, or None when the
                element sits directly in the process.

        Returns:
            The node ID, ``<parent node>/<position>``.
        """
        if element.is_event:
            node_type = NodeType.EVENT
        elif element.is_container:
            node_type = NodeType.CONTAINER
        else:
            node_type = NodeType.ELEMENT

        if parent_node is None:
            parent_node = _process_node(process_id)
            prefix = f"element:{process_id}"
        else:
            prefix = parent_node

        position = self._graph.out_degree(parent_node) if self._graph.has_node(parent_node) else 0
        node_id = f"{prefix}/{position}"
        self._graph.add_node(
            node_id,
            node_type=node_type,
            process=process_id,
            id=element.id,
            name=element.name,
            element=element,
            parent=parent_node,
        )
        if self._graph.has_node(parent_node):
            self._graph.add_edge(parent_node, node_id, edge_type=EdgeType.CONTAINS)

        self._element_index.setdefault((process_id, element.id), []).append(node_id)
        return node_id

    def add_message(self, message_id: str, **attrs: Any) -> str:
        """Add a model-level message declaration."""
        node_id = f"message:{message_id}"
        self._graph.add_node(node_id, node_type=NodeType.MESSAGE, id=message_id, **attrs)
        return node_id

    def add_signal(self, signal_id: str, **attrs: Any) -> str:
        """Add a model-level signal declaration."""
        node_id = f"signal:{signal_id}"
        self._graph.add_node(node_id, node_type=NodeType.SIGNAL, id=signal_id, **attrs)
        return node_id

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def _ids_of_type(self, node_type: NodeType) -> list[str]:
        return [
            data["id"]
            for _, data in self._graph.nodes(data=True)
            if data.get("node_type") == node_type
        ]

    def get_process_ids(self) -> list[str]:
        """Get all process ids in insertion order."""
        return self._ids_of_type(NodeType.PROCESS)

    def get_message_ids(self) -> list[str]:
        return self._ids_of_type(NodeType.MESSAGE)

    def get_signal_ids(self) -> list[str]:
        return self._ids_of_type(NodeType.SIGNAL)

    def has_process(self, process_id: str) -> bool:
        return self._graph.has_node(_process_node(process_id))

    def get_process_node(self, process_id: str) -> dict[str, Any] | None:
        """Get the node data for a process."""
        node_id = _process_node(process_id)
        if self._graph.has_node(node_id):
            return dict(self._graph.nodes[node_id])
        return None

    def contains_message_id(self, message_id: str) -> bool:
        """Check whether the model declares a message with this id."""
        return self._graph.has_node(f"message:{message_id}")

    def contains_signal_id(self, signal_id: str) -> bool:
        """Check whether the model declares a signal with this id."""
        return self._graph.has_node(f"signal:{signal_id}")

    def _iter_element_nodes(self, process_id: str) -> Iterator[dict[str, Any]]:
        if not self.has_process(process_id):
            raise UnknownProcessError(process_id)
        yield from self._iter_contained(_process_node(process_id))

    def _iter_contained(self, node_id: str) -> Iterator[dict[str, Any]]:
        for _, child, data in self._graph.out_edges(node_id, data=True):
            if data.get("edge_type") != EdgeType.CONTAINS:
                continue
            yield self._graph.nodes[child]
            yield from self._iter_contained(child)

    def iter_elements(self, process_id: str) -> Iterator[FlowElement]:
        """Iterate over all flow elements of a process.

        Elements are yielded depth-first in declaration order: a container
        comes before the elements nested inside it.

        Raises:
            UnknownProcessError: If the process is not in the graph.
        """
        for data in self._iter_element_nodes(process_id):
            yield data["element"]

    def events_of(self, process_id: str) -> list[FlowElement]:
        """Get every event of a process, including those in sub-processes.

        Raises:
            UnknownProcessError: If the process is not in the graph.
        """
        return [
            data["element"]
            for data in self._iter_element_nodes(process_id)
            if data["node_type"] == NodeType.EVENT
        ]

    def definitions_of(self, event: FlowElement) -> list[EventDefinition]:
        """Get the event definitions of an event in declaration order."""
        return list(event.definitions or [])

    def resolve_element(
        self, process_id: str, element_id: str, recursive: bool = True
    ) -> FlowElement | None:
        """Look up a flow element by id within a process.

        When the id is declared more than once, the first declaration wins.

        Args:
            process_id: The process to search.
            element_id: The flow element id.
            recursive: Also search inside nested containers. When False only
                elements placed directly in the process are considered.

        Returns:
            The element, or None if the id does not resolve.
        """
        for node_id in self._element_index.get((process_id, element_id), []):
            data = self._graph.nodes[node_id]
            if recursive or data["parent"] == _process_node(process_id):
                return data["element"]
        return None
