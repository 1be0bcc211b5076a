from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class Member:
    name: str
    display_name: Optional[str] = None


@dataclass(frozen=True)
class Expression:
    segments: Tuple[str, ...] = field(default_factory=tuple)

    def property_chain(self) -> Sequence[str]:
        return self.segments


class NotNullValidator:
    pass


class StubLanguageManager:
    def get_string(self, key, culture=None):
        return f"stub:{key}"
