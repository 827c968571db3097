"""Validation runner that applies process validators across a model."""

import logging
from pathlib import Path
from typing import Iterable, Sequence

from ..graph.builder import build_graph
from ..graph.model_graph import ModelGraph
from ..schema.errors import UnknownProcessError
from ..schema.loader import parse_model
from .base import ProcessValidator, ValidationResult
from .event_definitions import EventDefinitionValidator

logger = logging.getLogger(__name__)

DEFAULT_VALIDATORS: tuple[ProcessValidator, ...] = (EventDefinitionValidator(),)


def run_validators(
    graph: ModelGraph,
    validators: Sequence[ProcessValidator] = DEFAULT_VALIDATORS,
    process_ids: Iterable[str] | None = None,
) -> ValidationResult:
    """Run validators over the processes of a model.

    Args:
        graph: The process graph.
        validators: Validators to apply to each process, in order.
        process_ids: Processes to validate. Defaults to every process in
            declaration order.

    Returns:
        Combined ValidationResult, ordered by process then validator.

    Raises:
        UnknownProcessError: If a requested process is not in the graph.
    """
    if process_ids is None:
        selected = graph.get_process_ids()
    else:
        selected = list(process_ids)
        for process_id in selected:
            if not graph.has_process(process_id):
                raise UnknownProcessError(process_id)

    result = ValidationResult()
    for process_id in selected:
        for validator in validators:
            result.merge(validator.validate(graph, process_id))

    logger.info(
        "Validated %d process(es) with %d validator(s): %d error(s)",
        len(selected),
        len(validators),
        len(result.errors),
    )
    return result


def validate_model_file(
    path: str | Path, process_ids: Iterable[str] | None = None
) -> ValidationResult:
    """Load and validate a process definition file.

    Args:
        path: Path to the YAML process definition.
        process_ids: Optional subset of processes to validate.

    Returns:
        ValidationResult from all default validators.

    Raises:
        SchemaLoadError: If the file cannot be loaded.
        SchemaValidationError: If the model fails schema validation.
        UnknownProcessError: If a requested process is not in the model.
    """
    model = parse_model(path)
    graph = build_graph(model)
    return run_validators(graph, process_ids=process_ids)
