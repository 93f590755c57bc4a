"""Allow ``python -m llmspec``."""

from llmspec.cli import main

if __name__ == "__main__":
    main()
