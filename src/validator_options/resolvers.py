from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Hashable, Optional, Sequence, Tuple

from .protocols import AccessExpression, MemberDescriptor

logger = logging.getLogger("validator_options.resolvers")
logger.addHandler(logging.NullHandler())

__all__ = [
    "PropertyNameResolver",
    "ErrorCodeResolver",
    "DisplayNameCache",
    "DISPLAY_NAME_CACHE",
    "chain_from_expression",
    "default_property_name_resolver",
    "default_display_name_resolver",
    "default_error_code_resolver",
]

# (owner_type, member, expression) -> name
PropertyNameResolver = Callable[[Optional[type], Any, Any], Optional[str]]
ErrorCodeResolver = Callable[[Any], str]

_MISSING = object()


def _lookup_display_name(member: Any) -> Optional[str]:
    """
    Read a display name attached to a member.

    Checks a ``display_name`` attribute first, then a ``"display_name"`` key in a
    ``metadata`` mapping, which is where ``dataclasses.field(metadata=...)`` puts it.
    """
    name = getattr(member, "display_name", None)
    if name:
        return str(name)
    metadata = getattr(member, "metadata", None)
    if metadata:
        try:
            name = metadata.get("display_name")
        except AttributeError:
            return None
        if name:
            return str(name)
    return None


class DisplayNameCache:
    """Memoizes display-name lookups per member, including misses."""

    def __init__(self, lookup: Callable[[Any], Optional[str]] = _lookup_display_name) -> None:
        self._lookup = lookup
        self._lock = threading.RLock()
        self._names: Dict[Hashable, Optional[str]] = {}
        # unhashable members keyed by id; the member is kept alive so the id is not reused
        self._by_id: Dict[int, Tuple[Any, Optional[str]]] = {}

    def get(self, member: Any) -> Optional[str]:
        try:
            hash(member)
        except TypeError:
            return self._get_unhashable(member)
        cached = self._names.get(member, _MISSING)
        if cached is not _MISSING:
            return cached  # type: ignore[return-value]
        with self._lock:
            cached = self._names.get(member, _MISSING)
            if cached is _MISSING:
                cached = self._lookup(member)
                self._names[member] = cached
                logger.debug("Display name cached for %r -> %r", member, cached)
            return cached  # type: ignore[return-value]

    def _get_unhashable(self, member: Any) -> Optional[str]:
        entry = self._by_id.get(id(member))
        if entry is not None:
            return entry[1]
        with self._lock:
            entry = self._by_id.get(id(member))
            if entry is None:
                entry = (member, self._lookup(member))
                self._by_id[id(member)] = entry
                logger.debug("Display name cached for unhashable %r -> %r", member, entry[1])
            return entry[1]

    def clear(self) -> None:
        with self._lock:
            self._names.clear()
            self._by_id.clear()

    def __len__(self) -> int:
        return len(self._names) + len(self._by_id)


DISPLAY_NAME_CACHE = DisplayNameCache()


def chain_from_expression(expression: Any, separator: str = ".") -> str:
    """
    Convert a property-access expression into a property chain string.

    ``expression`` is either a string already holding a chain or an object
    implementing ``AccessExpression``. Indexer segments such as ``"[0]"`` are
    attached to the previous segment without a separator.
    """
    if isinstance(expression, str):
        return expression.strip()
    if not isinstance(expression, AccessExpression):
        raise TypeError(f"Unsupported property access expression: {type(expression)!r}")
    segments: Sequence[str] = expression.property_chain()
    chain = ""
    for segment in segments:
        if not segment:
            continue
        if not chain or segment.startswith("["):
            chain += segment
        else:
            chain += separator + segment
    return chain


def default_property_name_resolver(
    owner_type: Optional[type],
    member: Optional[MemberDescriptor],
    expression: Any,
    separator: str = ".",
) -> Optional[str]:
    if expression is not None:
        chain = chain_from_expression(expression, separator)
        if chain:
            return chain
    return member.name if member is not None else None


def default_display_name_resolver(
    owner_type: Optional[type], member: Any, expression: Any
) -> Optional[str]:
    if member is None:
        return None
    return DISPLAY_NAME_CACHE.get(member)


def default_error_code_resolver(validator: Any) -> str:
    return type(validator).__name__
