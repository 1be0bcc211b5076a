from typing import Any, Optional, Sequence

from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class MemberDescriptor(Protocol):
    name: str


@runtime_checkable
class AccessExpression(Protocol):
    def property_chain(self) -> Sequence[str]: ...


@runtime_checkable
class ValidatorSelector(Protocol):
    """Marker for objects deciding which rules a validation run executes."""


@runtime_checkable
class LanguageManagerProtocol(Protocol):
    def get_string(self, key: str, culture: Optional[str] = None) -> str: ...


@runtime_checkable
class MessageFormatterProtocol(Protocol):
    def build_message(self, template: str) -> str: ...

    def append_argument(self, name: str, value: Any) -> Any: ...
