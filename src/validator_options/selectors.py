from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from .protocols import ValidatorSelector

logger = logging.getLogger("validator_options.selectors")
logger.addHandler(logging.NullHandler())

__all__ = [
    "DefaultValidatorSelector",
    "MemberNameValidatorSelector",
    "RulesetValidatorSelector",
    "ValidatorSelectorOptions",
]

DefaultSelectorFactory = Callable[[], ValidatorSelector]
NamedSelectorFactory = Callable[[Sequence[str]], ValidatorSelector]


@dataclass(frozen=True)
class DefaultValidatorSelector:
    """Selects every rule."""


@dataclass(frozen=True)
class MemberNameValidatorSelector:
    """Selects rules targeting the given property names."""

    member_names: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "member_names", tuple(self.member_names))


@dataclass(frozen=True)
class RulesetValidatorSelector:
    """Selects rules belonging to the given rule sets."""

    rule_sets: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "rule_sets", tuple(self.rule_sets))


def _default_selector_factory() -> ValidatorSelector:
    return DefaultValidatorSelector()


def _member_name_selector_factory(member_names: Sequence[str]) -> ValidatorSelector:
    return MemberNameValidatorSelector(tuple(member_names))


def _ruleset_selector_factory(rule_sets: Sequence[str]) -> ValidatorSelector:
    return RulesetValidatorSelector(tuple(rule_sets))


class ValidatorSelectorOptions:
    """
    Factories for the selectors a validation run uses to pick rules.

    Assigning None to a factory restores its built-in.
    """

    def __init__(self) -> None:
        self._default_factory: DefaultSelectorFactory = _default_selector_factory
        self._member_name_factory: NamedSelectorFactory = _member_name_selector_factory
        self._ruleset_factory: NamedSelectorFactory = _ruleset_selector_factory

    @property
    def default_validator_selector_factory(self) -> DefaultSelectorFactory:
        return self._default_factory

    @default_validator_selector_factory.setter
    def default_validator_selector_factory(self, value: Optional[DefaultSelectorFactory]) -> None:
        if value is None:
            logger.info("Default selector factory reverted to built-in.")
            value = _default_selector_factory
        self._default_factory = value

    @property
    def member_name_validator_selector_factory(self) -> NamedSelectorFactory:
        return self._member_name_factory

    @member_name_validator_selector_factory.setter
    def member_name_validator_selector_factory(self, value: Optional[NamedSelectorFactory]) -> None:
        if value is None:
            logger.info("Member name selector factory reverted to built-in.")
            value = _member_name_selector_factory
        self._member_name_factory = value

    @property
    def ruleset_validator_selector_factory(self) -> NamedSelectorFactory:
        return self._ruleset_factory

    @ruleset_validator_selector_factory.setter
    def ruleset_validator_selector_factory(self, value: Optional[NamedSelectorFactory]) -> None:
        if value is None:
            logger.info("Ruleset selector factory reverted to built-in.")
            value = _ruleset_selector_factory
        self._ruleset_factory = value

    def reset(self) -> None:
        self._default_factory = _default_selector_factory
        self._member_name_factory = _member_name_selector_factory
        self._ruleset_factory = _ruleset_selector_factory

    def __repr__(self) -> str:
        return (
            f"<ValidatorSelectorOptions default={self._default_factory!r} "
            f"member_name={self._member_name_factory!r} ruleset={self._ruleset_factory!r}>"
        )
