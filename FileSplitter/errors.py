# FileSplitter/FileSplitter/errors.py
"""Error kinds raised by the splitter."""


class SplitterError(Exception):
    """Base class for every splitter failure"""


class ConfigurationError(SplitterError, ValueError):
    """An option is outside its allowed range or is not recognised"""


class InvalidPathError(SplitterError, FileNotFoundError):
    """No input file matched the given path patterns"""

    def __init__(self, patterns):
        self.patterns = list(patterns)
        super().__init__(f"No input files match: {', '.join(map(str, self.patterns))}")


class OpenFailureError(SplitterError, OSError):
    """Reading an input or writing one of its outputs failed"""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed on {path}: {reason}")
