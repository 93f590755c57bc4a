"""CLI command for printing the manifest JSON schemas."""

from __future__ import annotations

import click

from llmspec.config import get_config
from llmspec.writer import to_json_text


@click.command()
@click.argument("pipeline", type=click.Choice(["skills", "definitions"]))
def schema(pipeline: str) -> None:
    """Print the JSON schema of a public manifest."""
    base_url = get_config().base_url
    if pipeline == "skills":
        from llmspec.skills.schema import build_skills_schema

        data = build_skills_schema(base_url)
    else:
        from llmspec.definitions.schema import build_definitions_schema

        data = build_definitions_schema(base_url)
    click.echo(to_json_text(data), nl=False)
