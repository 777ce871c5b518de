"""Generate JSON Schema and docs for the settings YAML format."""

from __future__ import annotations

import json
from pathlib import Path

from assertasync.config import SETTINGS_KEY, Settings


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def generate_json_schema() -> dict:
    schema = Settings.model_json_schema()
    schema["title"] = "assertasync settings"
    return schema


def write_json_schema(path: Path) -> None:
    _ensure_parent(path)
    schema = generate_json_schema()
    path.write_text(json.dumps(schema, indent=2) + "\n")


def generate_schema_doc() -> str:
    props = generate_json_schema().get("properties", {})

    lines: list[str] = []
    lines.append("# assertasync settings")
    lines.append("")
    lines.append("This doc is generated from the Pydantic model.")
    lines.append("")
    lines.append(
        f"Keys may sit at the top level or under an `{SETTINGS_KEY}:` mapping. "
        "String values may reference environment variables as `${VAR}` or "
        "`${VAR:-default}`."
    )
    lines.append("")
    for name, prop in props.items():
        kind = prop.get("type", "any")
        default = prop.get("default")
        lines.append(f"- `{name}`: {kind} (default: `{default}`)")
    lines.append("")
    return "\n".join(lines)


def write_schema_doc(path: Path) -> None:
    _ensure_parent(path)
    path.write_text(generate_schema_doc())
