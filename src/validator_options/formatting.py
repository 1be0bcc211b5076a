from __future__ import annotations

import re
from typing import Any, Dict, Optional

__all__ = ["MessageFormatter"]

_PLACEHOLDER = re.compile(r"\{([^{}:]+)(?::([^{}]*))?\}")


class MessageFormatter:
    """
    Builds error messages by substituting ``{Name}`` placeholders.

    Placeholders without a matching argument are left in the message. A
    placeholder may carry a format spec, e.g. ``{ComparisonValue:.2f}``.
    """

    PROPERTY_NAME = "PropertyName"
    PROPERTY_VALUE = "PropertyValue"

    def __init__(self) -> None:
        self._arguments: Dict[str, Any] = {}

    @property
    def placeholder_values(self) -> Dict[str, Any]:
        return dict(self._arguments)

    def append_argument(self, name: str, value: Any) -> "MessageFormatter":
        self._arguments[name] = value
        return self

    def append_property_name(self, name: Optional[str]) -> "MessageFormatter":
        return self.append_argument(self.PROPERTY_NAME, name)

    def append_property_value(self, value: Any) -> "MessageFormatter":
        return self.append_argument(self.PROPERTY_VALUE, value)

    def build_message(self, template: str) -> str:
        def _replace(match: "re.Match[str]") -> str:
            key, spec = match.group(1), match.group(2)
            if key not in self._arguments:
                return match.group(0)
            value = self._arguments[key]
            if value is None:
                return ""
            if spec:
                try:
                    return format(value, spec)
                except (TypeError, ValueError):
                    return str(value)
            return str(value)

        return _PLACEHOLDER.sub(_replace, template)

    def __repr__(self) -> str:
        return f"<MessageFormatter arguments={sorted(self._arguments)!r}>"
