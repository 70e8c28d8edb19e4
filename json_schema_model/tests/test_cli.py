#!/usr/bin/env python3

import json

from click.testing import CliRunner

from json_schema_model.json_schema_model import json_schema_model


def write_json(path, value):
    path.write_text(json.dumps(value), encoding="utf-8")
    return path


class TestCli:
    """Test cases for the json_schema_model command"""

    def test_normalizes_to_output_file(self, tmp_path):
        schema = write_json(tmp_path / "schema.json", {"type": "object", "enum": ["a"], "title": "Letter"})
        output = tmp_path / "out.json"

        result = CliRunner().invoke(json_schema_model, [str(schema), str(output)])

        assert result.exit_code == 0, result.output
        assert json.loads(output.read_text(encoding="utf-8")) == {"title": "Letter", "enum": ["a"]}

    def test_writes_to_stdout(self, tmp_path):
        schema = write_json(tmp_path / "schema.json", {"type": "null"})

        result = CliRunner().invoke(json_schema_model, ["--indent", "0", str(schema)])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {"type": "null"}

    def test_check_reports_kind(self, tmp_path):
        schema = write_json(tmp_path / "schema.json", {"oneOf": [{"type": "string"}]})

        result = CliRunner().invoke(json_schema_model, ["--check", str(schema)])

        assert result.exit_code == 0, result.output
        assert "oneOf schema" in result.output

    def test_decode_error_exits_with_message(self, tmp_path):
        schema = write_json(tmp_path / "schema.json", {"type": "bogus"})

        result = CliRunner().invoke(json_schema_model, [str(schema)])

        assert result.exit_code == 1
        assert "Unsupported schema type" in result.output
        assert "#/type" in result.output

    def test_invalid_json_exits_with_message(self, tmp_path):
        schema = tmp_path / "schema.json"
        schema.write_text('{"type": ', encoding="utf-8")

        result = CliRunner().invoke(json_schema_model, [str(schema)])

        assert result.exit_code == 1
        assert "not valid JSON" in result.output

    def test_max_depth_option(self, tmp_path):
        schema = write_json(tmp_path / "schema.json", {"type": "array", "items": {"type": "string"}})

        result = CliRunner().invoke(json_schema_model, ["--max-depth", "0", "--check", str(schema)])

        assert result.exit_code == 1
        assert "maximum depth" in result.output

    def test_config_file(self, tmp_path):
        schema = write_json(tmp_path / "schema.json", {"type": "string", "minLength": 1})
        config = write_json(tmp_path / "config.json", {"indent": None, "sort_keys": True})

        result = CliRunner().invoke(json_schema_model, ["--config", str(config), str(schema)])

        assert result.exit_code == 0, result.output
        assert result.output.strip() == '{"minLength": 1, "type": "string"}'

    def test_malformed_config_file_exits_with_message(self, tmp_path):
        schema = write_json(tmp_path / "schema.json", {"type": "null"})
        config = tmp_path / "config.json"
        config.write_text('{"indent": ', encoding="utf-8")

        result = CliRunner().invoke(json_schema_model, ["--config", str(config), str(schema)])

        assert result.exit_code == 1
        assert "Invalid config file" in result.output

    def test_wrong_typed_config_value_exits_with_message(self, tmp_path):
        schema = write_json(tmp_path / "schema.json", {"type": "null"})
        config = write_json(tmp_path / "config.json", {"max_depth": "x"})

        result = CliRunner().invoke(json_schema_model, ["--config", str(config), str(schema)])

        assert result.exit_code == 1
        assert "max_depth must be a non-negative integer" in result.output

    def test_lone_surrogate_escape_exits_with_message(self, tmp_path):
        schema = tmp_path / "schema.json"
        schema.write_text('{"type": "string", "title": "\\ud800"}', encoding="utf-8")
        output = tmp_path / "out.json"

        result = CliRunner().invoke(json_schema_model, [str(schema), str(output)])

        assert result.exit_code == 1
        assert "cannot be written as UTF-8" in result.output
        assert not output.exists()
