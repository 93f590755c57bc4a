"""
Exception types for the llmspec build pipelines.

Only boundary violations are raised out of a pipeline run. Input and
resource defects are recorded on the BuildReport and the run continues.
"""


class LlmspecError(Exception):
    """Base class for fatal build errors."""


class OutputBoundaryError(LlmspecError):
    """Raised when an output path resolves outside its designated directory."""

    def __init__(self, target: str, base_dir: str, label: str = ""):
        self.target = target
        self.base_dir = base_dir
        self.label = label
        suffix = f" ({label})" if label else ""
        super().__init__(f"Output boundary violation{suffix}: {target} is outside {base_dir}")


class CorpusRootMissingError(LlmspecError):
    """Raised when a corpus root directory does not exist."""

    def __init__(self, root: str, hint: str = ""):
        self.root = root
        self.hint = hint
        super().__init__(f"Corpus root not found: {root}")
