import json

import yaml
from typer.testing import CliRunner

from assertasync.cli import app

runner = CliRunner()


def test_show_prints_defaults():
    result = runner.invoke(app, ["show"])
    assert result.exit_code == 0
    shown = yaml.safe_load(result.output)
    assert shown["default_timeout"] == 1.0
    assert shown["default_stays_timeout"] == 0.1
    assert shown["evaluation_period"] == 1e-6


def test_show_loads_config(tmp_path, monkeypatch):
    monkeypatch.setenv("SLOW_CI", "4")
    config = tmp_path / "settings.yaml"
    config.write_text("assertasync:\n  default_timeout: ${SLOW_CI}\n")

    result = runner.invoke(app, ["show", "--config", str(config)])
    assert result.exit_code == 0
    assert yaml.safe_load(result.output)["default_timeout"] == 4.0


def test_show_missing_config():
    result = runner.invoke(app, ["show", "--config", "nonexistent.yaml"])
    assert result.exit_code != 0


def test_show_invalid_config(tmp_path):
    config = tmp_path / "settings.yaml"
    config.write_text("default_timeout: -2\n")

    result = runner.invoke(app, ["show", "-c", str(config)])
    assert result.exit_code == 1


def test_schema_writes_json_schema_and_docs(tmp_path):
    out = tmp_path / "schema.json"
    doc = tmp_path / "schema.md"
    result = runner.invoke(app, ["schema", "--out", str(out), "--doc", str(doc)])

    assert result.exit_code == 0
    schema = json.loads(out.read_text())
    assert set(schema["properties"]) == {
        "default_timeout",
        "default_stays_timeout",
        "evaluation_period",
        "collect_garbage",
    }
    assert "`default_timeout`" in doc.read_text()


def test_schema_defaults_to_schemas_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["schema"])
    assert result.exit_code == 0
    assert (tmp_path / "schemas" / "assertasync.schema.json").exists()
