"""
CLI commands for building the catalogs.

Commands:
    llmspec build skills       Package skills and write the skills manifests
    llmspec build definitions  Compile provider/model TOML into manifests
    llmspec build all          Check both corpus roots, then run both pipelines

Recovered input defects are reported in the summary and still exit 0.
A missing corpus root or an output path outside its directory exits 1.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, NoReturn, Optional

import click

from llmspec.config import BuildConfig, get_config
from llmspec.errors import CorpusRootMissingError, LlmspecError
from llmspec.report import BuildReport

website_dir_option = click.option(
    "--website-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Website directory (default: LLMSPEC_WEBSITE_DIR or ./website)",
)
skills_root_option = click.option(
    "--skills-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Skills corpus root (default: <repo>/skills)",
)
providers_root_option = click.option(
    "--providers-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Provider definitions root (default: <repo>/models.dev/providers)",
)


def _load_config(**options: Optional[Path]) -> BuildConfig:
    overrides = {key: value for key, value in options.items() if value is not None}
    return get_config(**overrides)


def _fail(error: Exception) -> NoReturn:
    click.echo(click.style(f"Error: {error}", fg="red"), err=True)
    hint = getattr(error, "hint", "")
    if hint:
        click.echo(f"Hint: {hint}", err=True)
    raise SystemExit(1)


def _run(pipeline: Callable[[BuildConfig], BuildReport], config: BuildConfig) -> BuildReport:
    try:
        report = pipeline(config)
    except (LlmspecError, OSError) as e:
        _fail(e)
    click.echo(report.summary(relative_to=str(config.website_path)))
    return report


def _run_skills(config: BuildConfig) -> BuildReport:
    from llmspec.skills import build_skills

    return build_skills(config)


def _run_definitions(config: BuildConfig) -> BuildReport:
    from llmspec.definitions import build_definitions

    return build_definitions(config)


@click.group()
def build():
    """Build catalog artifacts for the website."""
    pass


@build.command("skills")
@website_dir_option
@skills_root_option
def build_skills_cmd(website_dir: Optional[Path], skills_root: Optional[Path]) -> None:
    """Package every skill as a ZIP and write the skills manifests."""
    config = _load_config(website_dir=website_dir, skills_root=skills_root)
    _run(_run_skills, config)


@build.command("definitions")
@website_dir_option
@providers_root_option
def build_definitions_cmd(website_dir: Optional[Path], providers_root: Optional[Path]) -> None:
    """Compile provider and model TOML files into the definitions manifests."""
    config = _load_config(website_dir=website_dir, providers_root=providers_root)
    _run(_run_definitions, config)


@build.command("all")
@website_dir_option
@skills_root_option
@providers_root_option
def build_all_cmd(
    website_dir: Optional[Path],
    skills_root: Optional[Path],
    providers_root: Optional[Path],
) -> None:
    """Run the skills and definitions pipelines."""
    from llmspec.definitions.pipeline import SUBMODULE_HINT

    config = _load_config(
        website_dir=website_dir,
        skills_root=skills_root,
        providers_root=providers_root,
    )

    # Neither pipeline writes anything unless both roots exist
    if not config.skills_root_dir.is_dir():
        _fail(CorpusRootMissingError(str(config.skills_root_dir)))
    if not config.providers_root_dir.is_dir():
        _fail(CorpusRootMissingError(str(config.providers_root_dir), hint=SUBMODULE_HINT))

    skills_report = _run(_run_skills, config)
    click.echo()
    definitions_report = _run(_run_definitions, config)

    total_errors = skills_report.error_count + definitions_report.error_count
    if total_errors:
        click.echo(f"\nCompleted with {total_errors} recovered error(s).")
