from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="assertasync", help="Inspect polling assertion settings")


@app.command()
def show(
    config: str | None = typer.Option(
        None, "--config", "-c", help="Path to a settings YAML file"
    ),
):
    """Print the effective settings, after defaults and variable expansion."""
    import yaml

    from assertasync.config import DEFAULT_SETTINGS, load_settings

    if config is None:
        settings = DEFAULT_SETTINGS
    else:
        config_path = Path(config)
        if not config_path.exists():
            typer.echo(f"Error: config file not found: {config}", err=True)
            raise typer.Exit(1)
        try:
            settings = load_settings(config_path)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)

    typer.echo(yaml.safe_dump(settings.model_dump(), sort_keys=False).rstrip())


@app.command()
def schema(
    out: str = typer.Option(
        "schemas/assertasync.schema.json", help="Output path for JSON Schema"
    ),
    doc: str | None = typer.Option(None, help="Optional output path for schema docs"),
):
    """Generate the JSON Schema (and optionally docs) for the settings file."""
    from assertasync.schema import write_json_schema, write_schema_doc

    out_path = Path(out)
    write_json_schema(out_path)
    typer.echo(f"Wrote schema: {out_path}")
    if doc is not None:
        doc_path = Path(doc)
        write_schema_doc(doc_path)
        typer.echo(f"Wrote docs: {doc_path}")
