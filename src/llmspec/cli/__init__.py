"""
llmspec CLI - Build the skills and model-definitions catalogs.

Commands:
    llmspec build skills       Package skills and write the skills manifests
    llmspec build definitions  Compile provider/model TOML into manifests
    llmspec build all          Run both pipelines
    llmspec schema             Print a manifest JSON schema
"""

from typing import Optional

import click

from llmspec.config import get_config
from llmspec.logger import configure_logging

from .build import build
from .schema import schema

LOG_LEVELS = ["debug", "info", "warning", "error"]


@click.group()
@click.version_option(package_name="llmspec")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default: LLMSPEC_LOG_LEVEL or info)",
)
@click.option(
    "--log-format",
    type=click.Choice(["text", "json"]),
    default=None,
    help="Log output format (default: LLMSPEC_LOG_FORMAT or text)",
)
def main(log_level: Optional[str], log_format: Optional[str]):
    """llmspec - Static catalog builder for llmspec.dev."""
    config = get_config()
    configure_logging(
        level=(log_level or config.log_level).lower(),
        fmt=log_format or config.log_format,
    )


main.add_command(build)
main.add_command(schema)


if __name__ == "__main__":
    main()
