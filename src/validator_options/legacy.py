"""
Flat, deprecated access to the validator configuration.

Every property forwards to a ``ValidatorConfiguration`` and holds no state of
its own. Each accessor is marked with ``typing_extensions.deprecated`` so type
checkers flag it, and emits a DeprecationWarning when used. This module can be
removed without affecting ``ValidatorConfiguration``.
"""

from __future__ import annotations

from typing import Optional

from typing_extensions import deprecated

from .config import MessageFormatterFactory, ValidatorConfiguration
from .enums import CascadeMode
from .protocols import LanguageManagerProtocol
from .resolvers import ErrorCodeResolver, PropertyNameResolver
from .selectors import ValidatorSelectorOptions

__all__ = ["LegacyValidatorOptions"]


def _use_instead(field: str) -> str:
    return f"Use GlobalConfiguration.{field} instead"


class LegacyValidatorOptions:
    """Flat facade over a ValidatorConfiguration, kept for backward compatibility."""

    def __init__(self, configuration: ValidatorConfiguration) -> None:
        self._configuration = configuration

    @property
    def global_configuration(self) -> ValidatorConfiguration:
        return self._configuration

    @property
    @deprecated(_use_instead("cascade_mode"))
    def cascade_mode(self) -> CascadeMode:
        return self._configuration.cascade_mode

    @cascade_mode.setter
    @deprecated(_use_instead("cascade_mode"))
    def cascade_mode(self, value: Optional[CascadeMode]) -> None:
        self._configuration.cascade_mode = value

    @property
    @deprecated(_use_instead("property_chain_separator"))
    def property_chain_separator(self) -> str:
        return self._configuration.property_chain_separator

    @property_chain_separator.setter
    @deprecated(_use_instead("property_chain_separator"))
    def property_chain_separator(self, value: Optional[str]) -> None:
        self._configuration.property_chain_separator = value

    @property
    @deprecated(_use_instead("language_manager"))
    def language_manager(self) -> LanguageManagerProtocol:
        return self._configuration.language_manager

    @language_manager.setter
    @deprecated(_use_instead("language_manager"))
    def language_manager(self, value: LanguageManagerProtocol) -> None:
        self._configuration.language_manager = value

    @property
    @deprecated(_use_instead("validator_selectors"))
    def validator_selectors(self) -> ValidatorSelectorOptions:
        return self._configuration.validator_selectors

    @property
    @deprecated(_use_instead("message_formatter_factory"))
    def message_formatter_factory(self) -> MessageFormatterFactory:
        return self._configuration.message_formatter_factory

    @message_formatter_factory.setter
    @deprecated(_use_instead("message_formatter_factory"))
    def message_formatter_factory(self, value: Optional[MessageFormatterFactory]) -> None:
        self._configuration.message_formatter_factory = value

    @property
    @deprecated(_use_instead("property_name_resolver"))
    def property_name_resolver(self) -> PropertyNameResolver:
        return self._configuration.property_name_resolver

    @property_name_resolver.setter
    @deprecated(_use_instead("property_name_resolver"))
    def property_name_resolver(self, value: Optional[PropertyNameResolver]) -> None:
        self._configuration.property_name_resolver = value

    @property
    @deprecated(_use_instead("display_name_resolver"))
    def display_name_resolver(self) -> PropertyNameResolver:
        return self._configuration.display_name_resolver

    @display_name_resolver.setter
    @deprecated(_use_instead("display_name_resolver"))
    def display_name_resolver(self, value: Optional[PropertyNameResolver]) -> None:
        self._configuration.display_name_resolver = value

    @property
    @deprecated(_use_instead("disable_accessor_cache"))
    def disable_accessor_cache(self) -> bool:
        return self._configuration.disable_accessor_cache

    @disable_accessor_cache.setter
    @deprecated(_use_instead("disable_accessor_cache"))
    def disable_accessor_cache(self, value: Optional[bool]) -> None:
        self._configuration.disable_accessor_cache = value

    @property
    @deprecated(_use_instead("error_code_resolver"))
    def error_code_resolver(self) -> ErrorCodeResolver:
        return self._configuration.error_code_resolver

    @error_code_resolver.setter
    @deprecated(_use_instead("error_code_resolver"))
    def error_code_resolver(self, value: Optional[ErrorCodeResolver]) -> None:
        self._configuration.error_code_resolver = value

    def __repr__(self) -> str:
        return f"<LegacyValidatorOptions configuration={self._configuration!r}>"
