"""Builder for converting a ProcessModel to a ModelGraph."""

from ..schema.models import FlowElement, ProcessModel
from .model_graph import ModelGraph


def build_graph(model: ProcessModel) -> ModelGraph:
    """Build a ModelGraph from a ProcessModel.

    Args:
        model: The parsed process model.

    Returns:
        A ModelGraph representing the model.
    """
    graph = ModelGraph()

    for message in model.messages:
        graph.add_message(message.id, name=message.name)

    for signal in model.signals:
        graph.add_signal(signal.id, name=signal.name, scope=signal.scope)

    for process in model.processes:
        graph.add_process(process.id, name=process.name)
        for element in process.elements:
            _add_element_tree(graph, process.id, element, None)

    return graph


def _add_element_tree(
    graph: ModelGraph,
    process_id: str,
    element: FlowElement,
    parent_node: str | None,
) -> None:
    node_id = graph.add_element(process_id, element, parent_node=parent_node)
    for child in element.elements:
        _add_element_tree(graph, process_id, child, node_id)
