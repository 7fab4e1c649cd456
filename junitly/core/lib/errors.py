"""
Exceptions raised by junitly.

ConfigurationError is raised while settings are loaded, before any class is
checked. MalformedNameError means the tree handed to a check broke the shape
the parser adapter guarantees.
"""


class JunitlyError(Exception):
    """Base exception for junitly errors."""


class ConfigurationError(JunitlyError):
    def __init__(self, option: str, pattern: str, reason: str = "") -> None:
        message = f"Invalid regular expression for '{option}': {pattern!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.option = option
        self.pattern = pattern
        self.reason = reason


class MalformedNameError(JunitlyError):
    def __init__(self, node) -> None:
        super().__init__(f"Expected an identifier or a dotted name, got {node!r}")
        self.node = node
