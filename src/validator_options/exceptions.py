from __future__ import annotations


class ValidatorOptionsError(Exception):
    """Base validator options exception."""


class InvalidArgumentError(ValidatorOptionsError, ValueError):
    """Raised when a required configuration slot is assigned None."""

    def __init__(self, name: str, message: str | None = None) -> None:
        self.name = name
        super().__init__(message or f"{name} cannot be None.")


class ConfigNotFoundError(ValidatorOptionsError, KeyError):
    """Raised when a requested configuration field does not exist."""

    def __init__(self, names: "list[str]") -> None:
        self.names = list(names)
        super().__init__(f"Unknown configuration fields: {', '.join(self.names)}")

    def __str__(self) -> str:
        # KeyError quotes its argument otherwise
        return str(self.args[0])
