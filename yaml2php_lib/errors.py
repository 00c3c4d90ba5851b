from typing import Any, Optional, Sequence


class ConversionError(Exception):
    """Base class for every error raised while converting YAML to PHP."""


class LoadError(ConversionError):
    """A YAML file could not be read. Carries the failing path and the underlying cause."""

    def __init__(self, path: Optional[str], cause: BaseException, message: Optional[str] = None) -> None:
        self.path = path
        self.cause = cause
        if message is None:
            message = f"Failed to load YAML file: {path} with error {cause}"
        super().__init__(message)


class ParseError(LoadError):
    """PyYAML rejected the text. path is None when the input was a string."""

    def __init__(self, path: Optional[str], cause: BaseException) -> None:
        source = f"file: {path}" if path is not None else "string"
        super().__init__(path, cause, f"Failed to parse YAML {source} with error {cause}")


class IncludeCycleError(ConversionError):
    def __init__(self, chain: Sequence[str]) -> None:
        self.chain = list(chain)
        super().__init__("Include cycle detected: " + " -> ".join(self.chain))


class UnsupportedNodeError(ConversionError):
    def __init__(self, node: Any, reason: str = "unsupported node") -> None:
        self.node = node
        super().__init__(f"Cannot render {type(node).__name__}: {reason}")
