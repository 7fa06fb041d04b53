from __future__ import annotations


class ClickerError(Exception):
    """Base class for errors raised by clickerengine."""


class InvalidConfigurationError(ClickerError, ValueError):
    """An entity was constructed from an unusable configuration."""

    def __init__(self, kind: str, errors: list[str]) -> None:
        self.kind = kind
        self.errors = list(errors)
        super().__init__(
            f"Invalid {kind}:\n" + "\n".join(f"  - {e}" for e in self.errors)
        )


class InvalidArgumentError(ClickerError, ValueError):
    """A mutator was called with a value that would break an invariant."""
