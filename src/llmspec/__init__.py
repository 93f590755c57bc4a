"""
llmspec - Static catalog builder for the llmspec.dev website.

Two independent pipelines turn on-disk corpora into JSON manifests:

- skills: ``<skills_root>/<group>/<skill>/SKILL.md`` folders, packaged as
  ZIP downloads and listed in a public manifest and an internal catalog
- definitions: ``<providers_root>/<provider>/provider.toml`` plus
  ``models/**/*.toml``, compiled into a public manifest and an internal
  catalog

Each run also writes a JSON schema for its public manifest and returns a
BuildReport with counts and recovered errors.

Example usage:
    from llmspec import build_skills, build_definitions, get_config

    config = get_config(website_dir="website")
    print(build_skills(config).summary())
    print(build_definitions(config).summary())
"""

__version__ = "0.1.0"
__all__ = [
    "BuildConfig",
    "BuildReport",
    "build_definitions",
    "build_skills",
    "get_config",
    "should_exclude_path",
    "__version__",
]


# Lazy imports keep ``import llmspec`` cheap for the CLI
def __getattr__(name: str):
    if name in ("BuildConfig", "get_config"):
        from llmspec import config
        return getattr(config, name)
    if name == "BuildReport":
        from llmspec.report import BuildReport
        return BuildReport
    if name == "build_skills":
        from llmspec.skills.pipeline import build_skills
        return build_skills
    if name == "build_definitions":
        from llmspec.definitions.pipeline import build_definitions
        return build_definitions
    if name == "should_exclude_path":
        from llmspec.exclusion import should_exclude_path
        return should_exclude_path
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
