"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from eventlint.graph.builder import build_graph
from eventlint.schema.loader import parse_model_from_string


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def build():
    """Return a helper that parses YAML straight into a ModelGraph."""

    def _build(yaml_string: str):
        return build_graph(parse_model_from_string(yaml_string))

    return _build


@pytest.fixture
def nested_model_yaml() -> str:
    """Return a model with a sub-process nested two levels deep."""
    return """
messages:
  - id: orderPlaced
signals:
  - shopClosed
processes:
  - id: orders
    name: Orders
    elements:
      - id: start
        type: startEvent
        definitions:
          - message: orderPlaced
      - id: review
        type: userTask
      - id: shipping
        type: subProcess
        elements:
          - id: shippingStart
            type: startEvent
          - id: pack
            type: userTask
          - id: customs
            type: transaction
            elements:
              - id: declare
                type: serviceTask
              - id: customsTimeout
                type: boundaryEvent
                definitions:
                  - type: timer
                    timeDuration: P1D
      - id: end
        type: endEvent
  - id: empty
"""


@pytest.fixture
def nested_model(nested_model_yaml):
    """Return a parsed nested model."""
    return parse_model_from_string(nested_model_yaml)


@pytest.fixture
def nested_graph(nested_model):
    """Return a graph built from the nested model."""
    return build_graph(nested_model)
