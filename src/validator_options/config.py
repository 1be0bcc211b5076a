from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, Optional, Tuple

from .enums import CascadeMode
from .exceptions import ConfigNotFoundError, InvalidArgumentError
from .formatting import MessageFormatter
from .localization import LanguageManager
from .protocols import LanguageManagerProtocol, MessageFormatterProtocol
from .resolvers import (
    ErrorCodeResolver,
    PropertyNameResolver,
    default_display_name_resolver,
    default_error_code_resolver,
    default_property_name_resolver,
)
from .selectors import ValidatorSelectorOptions

logger = logging.getLogger("validator_options.config")
logger.addHandler(logging.NullHandler())

__all__ = ["ValidatorConfiguration", "get_global_configuration"]

MessageFormatterFactory = Callable[[], MessageFormatterProtocol]

DEFAULT_CASCADE_MODE = CascadeMode.CONTINUE
DEFAULT_PROPERTY_CHAIN_SEPARATOR = "."


class ValidatorConfiguration:
    """
    Runtime options consumed by the rule engine.

    Every slot except ``language_manager`` reverts to its built-in when assigned
    None. ``language_manager`` rejects None with InvalidArgumentError, since a
    validation run has no safe fallback for a missing message catalog.

    Writes are serialized per instance; reads are lock-free. Configure before
    validation runs start; reconfiguring during live traffic is the caller's
    responsibility.
    """

    FIELDS: Tuple[str, ...] = (
        "cascade_mode",
        "property_chain_separator",
        "language_manager",
        "message_formatter_factory",
        "property_name_resolver",
        "display_name_resolver",
        "disable_accessor_cache",
        "error_code_resolver",
    )

    def __init__(
        self,
        initial_values: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.__lock = threading.RLock()
        self.__selectors = ValidatorSelectorOptions()

        self.__cascade_mode: CascadeMode = DEFAULT_CASCADE_MODE
        self.__property_chain_separator: str = DEFAULT_PROPERTY_CHAIN_SEPARATOR
        self.__language_manager: LanguageManagerProtocol = LanguageManager()
        self.__message_formatter_factory: MessageFormatterFactory = MessageFormatter
        self.__property_name_resolver: PropertyNameResolver = self._resolve_property_name
        self.__display_name_resolver: PropertyNameResolver = default_display_name_resolver
        self.__disable_accessor_cache: bool = False
        self.__error_code_resolver: ErrorCodeResolver = default_error_code_resolver

        if initial_values:
            self.update(**initial_values)
        logger.debug("ValidatorConfiguration initialized id=%s", hex(id(self)))

    # forbid assignment to anything that is not a configuration field
    def __setattr__(self, name: str, value: Any) -> None:
        if (
            hasattr(self, "_ValidatorConfiguration__lock")
            and not name.startswith("_ValidatorConfiguration__")
            and name not in self.FIELDS
        ):
            raise AttributeError(f"{type(self).__name__} has no configuration field {name!r}")
        super().__setattr__(name, value)

    def _store(self, attr: str, value: Any) -> None:
        with self.__lock:
            super().__setattr__(f"_ValidatorConfiguration__{attr}", value)
            logger.debug("Configuration field %s set to %r", attr, value)

    def _reverted(self, attr: str, default: Any) -> Any:
        logger.info("Configuration field %s reverted to default.", attr)
        return default

    def _resolve_property_name(
        self, owner_type: Optional[type], member: Any, expression: Any
    ) -> Optional[str]:
        return default_property_name_resolver(
            owner_type, member, expression, self.__property_chain_separator
        )

    @property
    def cascade_mode(self) -> CascadeMode:
        """Default cascade mode for rules."""
        return self.__cascade_mode

    @cascade_mode.setter
    def cascade_mode(self, value: Optional[CascadeMode]) -> None:
        if value is None:
            value = self._reverted("cascade_mode", DEFAULT_CASCADE_MODE)
        self._store("cascade_mode", CascadeMode(value))

    @property
    def property_chain_separator(self) -> str:
        """Separator placed between segments of nested property names."""
        return self.__property_chain_separator

    @property_chain_separator.setter
    def property_chain_separator(self, value: Optional[str]) -> None:
        if value is None:
            value = self._reverted("property_chain_separator", DEFAULT_PROPERTY_CHAIN_SEPARATOR)
        self._store("property_chain_separator", value)

    @property
    def language_manager(self) -> LanguageManagerProtocol:
        """Message catalog used to look up default error messages."""
        return self.__language_manager

    @language_manager.setter
    def language_manager(self, value: LanguageManagerProtocol) -> None:
        if value is None:
            logger.error("Rejected None for language_manager; keeping %r", self.__language_manager)
            raise InvalidArgumentError("language_manager")
        self._store("language_manager", value)

    @property
    def validator_selectors(self) -> ValidatorSelectorOptions:
        """Factories for the selectors that choose which rules run."""
        return self.__selectors

    @property
    def message_formatter_factory(self) -> MessageFormatterFactory:
        """Zero-argument callable returning a new message formatter."""
        return self.__message_formatter_factory

    @message_formatter_factory.setter
    def message_formatter_factory(self, value: Optional[MessageFormatterFactory]) -> None:
        if value is None:
            value = self._reverted("message_formatter_factory", MessageFormatter)
        self._store("message_formatter_factory", value)

    @property
    def property_name_resolver(self) -> PropertyNameResolver:
        """
        Callable ``(owner_type, member, expression) -> name`` for property names.

        The built-in joins property chains with ``property_chain_separator``.
        """
        return self.__property_name_resolver

    @property_name_resolver.setter
    def property_name_resolver(self, value: Optional[PropertyNameResolver]) -> None:
        if value is None:
            value = self._reverted("property_name_resolver", self._resolve_property_name)
        self._store("property_name_resolver", value)

    @property
    def display_name_resolver(self) -> PropertyNameResolver:
        """Callable ``(owner_type, member, expression) -> name`` for display names."""
        return self.__display_name_resolver

    @display_name_resolver.setter
    def display_name_resolver(self, value: Optional[PropertyNameResolver]) -> None:
        if value is None:
            value = self._reverted("display_name_resolver", default_display_name_resolver)
        self._store("display_name_resolver", value)

    @property
    def disable_accessor_cache(self) -> bool:
        """Disables the compiled property accessor cache. Not recommended."""
        return self.__disable_accessor_cache

    @disable_accessor_cache.setter
    def disable_accessor_cache(self, value: Optional[bool]) -> None:
        if value is None:
            value = self._reverted("disable_accessor_cache", False)
        self._store("disable_accessor_cache", bool(value))

    @property
    def error_code_resolver(self) -> ErrorCodeResolver:
        """Callable ``(validator) -> str`` giving the default error code."""
        return self.__error_code_resolver

    @error_code_resolver.setter
    def error_code_resolver(self, value: Optional[ErrorCodeResolver]) -> None:
        if value is None:
            value = self._reverted("error_code_resolver", default_error_code_resolver)
        self._store("error_code_resolver", value)

    def _check_fields(self, names: Any) -> None:
        unknown = [n for n in names if n not in self.FIELDS]
        if unknown:
            logger.error("Unknown configuration fields: %s", unknown)
            raise ConfigNotFoundError(unknown)

    def update(self, **changes: Any) -> None:
        """
        Assign several fields at once through their setters.

        Unknown names raise ConfigNotFoundError before anything is assigned. If a
        setter rejects a value, fields already assigned are restored and the
        error propagates.
        """
        self._check_fields(changes)
        if "language_manager" in changes and changes["language_manager"] is None:
            logger.error("Rejected None for language_manager in update()")
            raise InvalidArgumentError("language_manager")
        if not changes:
            return
        with self.__lock:
            prior = {name: getattr(self, name) for name in changes}
            try:
                for name, value in changes.items():
                    setattr(self, name, value)
            except Exception:
                for name, value in prior.items():
                    self._store(name, value)
                logger.error("Configuration update rolled back keys=%s", list(changes))
                raise
        logger.info("Configuration updated keys=%s", list(changes))

    def reset(self) -> None:
        """Restore every field and selector factory to its built-in."""
        with self.__lock:
            self.__selectors.reset()
            self.update(
                cascade_mode=None,
                property_chain_separator=None,
                language_manager=LanguageManager(),
                message_formatter_factory=None,
                property_name_resolver=None,
                display_name_resolver=None,
                disable_accessor_cache=None,
                error_code_resolver=None,
            )
        logger.info("Configuration reset to defaults.")

    def snapshot(self) -> MappingProxyType:
        """Return a read-only view of the current field values."""
        return MappingProxyType({name: getattr(self, name) for name in self.FIELDS})

    @contextmanager
    def temp_update(self, **changes: Any) -> Iterator["ValidatorConfiguration"]:
        """
        Context manager for temporary configuration changes. Restores the prior
        values on exit, including when the block raises.
        """
        self._check_fields(changes)
        with self.__lock:
            prior = {name: getattr(self, name) for name in changes}
            try:
                self.update(**changes)
                yield self
            finally:
                self.update(**prior)
                logger.info("Temporary configuration update reverted.")

    def __repr__(self) -> str:
        return (
            f"<ValidatorConfiguration cascade_mode={self.__cascade_mode.value} "
            f"separator={self.__property_chain_separator!r} "
            f"disable_accessor_cache={self.__disable_accessor_cache}>"
        )


_global_lock = threading.Lock()
_global_configuration: Optional[ValidatorConfiguration] = None


def get_global_configuration() -> ValidatorConfiguration:
    """Return the process-wide configuration, creating it on first access."""
    global _global_configuration
    if _global_configuration is None:
        with _global_lock:
            if _global_configuration is None:
                _global_configuration = ValidatorConfiguration()
                logger.debug("Global ValidatorConfiguration created.")
    return _global_configuration
