"""Tests for schema loader."""

import pytest

from eventlint.schema.errors import SchemaLoadError, SchemaValidationError
from eventlint.schema.loader import (
    load_yaml,
    parse_model,
    parse_model_data,
    parse_model_from_string,
)


class TestLoadYaml:
    def test_load_valid_yaml(self, tmp_path):
        yaml_file = tmp_path / "model.yaml"
        yaml_file.write_text("messages:\n  - m1\n  - m2")

        data = load_yaml(yaml_file)
        assert data["messages"] == ["m1", "m2"]

    def test_file_not_found(self):
        with pytest.raises(SchemaLoadError) as exc_info:
            load_yaml("/nonexistent/model.yaml")
        assert "not found" in str(exc_info.value).lower()
        assert exc_info.value.path == "/nonexistent/model.yaml"

    def test_directory_is_not_a_file(self, tmp_path):
        with pytest.raises(SchemaLoadError) as exc_info:
            load_yaml(tmp_path)
        assert "Not a file" in str(exc_info.value)

    def test_invalid_yaml(self, tmp_path):
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("processes: [unclosed")

        with pytest.raises(SchemaLoadError) as exc_info:
            load_yaml(yaml_file)
        assert "Invalid YAML" in str(exc_info.value)

    def test_empty_file_returns_empty_dict(self, tmp_path):
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        assert load_yaml(yaml_file) == {}

    def test_non_mapping_at_root(self, tmp_path):
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b")

        with pytest.raises(SchemaLoadError) as exc_info:
            load_yaml(yaml_file)
        assert "mapping" in str(exc_info.value).lower()


class TestParseModelFromString:
    def test_parse_process(self):
        model = parse_model_from_string(
            """
processes:
  - id: p1
    elements:
      - id: start
        type: startEvent
        definitions:
          - timer:
              timeCycle: R/PT1H
"""
        )
        start = model.processes[0].elements[0]
        assert start.id == "start"
        assert start.definitions[0].time_cycle == "R/PT1H"

    def test_parse_empty_model(self):
        model = parse_model_from_string("")
        assert model.processes == []

    def test_invalid_yaml_string(self):
        with pytest.raises(SchemaLoadError):
            parse_model_from_string("processes: [oops")

    def test_scalar_root_rejected(self):
        with pytest.raises(SchemaLoadError):
            parse_model_from_string("just a string")

    def test_schema_errors_are_collected(self):
        yaml_str = """
processes:
  - name: no id here
    elements:
      - id: e1
"""
        with pytest.raises(SchemaValidationError) as exc_info:
            parse_model_from_string(yaml_str)

        locs = {err["loc"] for err in exc_info.value.errors}
        assert "processes.0.id" in locs
        assert "processes.0.elements.0.type" in locs


class TestParseModel:
    def test_parse_example_file(self, examples_dir):
        model = parse_model(examples_dir / "order_fulfillment.yaml")

        assert model.get_process_ids() == ["fulfillment"]
        assert {m.id for m in model.messages} == {"orderPlaced", "paymentReceived"}

    def test_parse_model_data(self):
        model = parse_model_data({"signals": ["s1"]})
        assert model.signals[0].id == "s1"
