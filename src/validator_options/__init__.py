"""
validator_options: process-wide runtime options for a declarative validation library.

- Holds the defaults the rule engine reads at validation time.
- Every resolver and factory slot reverts to its built-in when cleared with None.
- The language manager slot rejects None instead of reverting.
- A deprecated flat facade forwards to the same configuration object.
"""

from __future__ import annotations

from validator_options.config import ValidatorConfiguration, get_global_configuration
from validator_options.enums import CascadeMode
from validator_options.exceptions import (
    ConfigNotFoundError,
    InvalidArgumentError,
    ValidatorOptionsError,
)
from validator_options.formatting import MessageFormatter
from validator_options.legacy import LegacyValidatorOptions
from validator_options.localization import LanguageManager
from validator_options.resolvers import (
    DisplayNameCache,
    chain_from_expression,
    default_display_name_resolver,
    default_error_code_resolver,
    default_property_name_resolver,
)
from validator_options.selectors import (
    DefaultValidatorSelector,
    MemberNameValidatorSelector,
    RulesetValidatorSelector,
    ValidatorSelectorOptions,
)

# Default instances for module-level access
GlobalConfiguration = get_global_configuration()
ValidatorOptions = LegacyValidatorOptions(GlobalConfiguration)

__all__ = [
    "GlobalConfiguration",
    "ValidatorOptions",
    "ValidatorConfiguration",
    "LegacyValidatorOptions",
    "get_global_configuration",
    "CascadeMode",
    "ValidatorOptionsError",
    "InvalidArgumentError",
    "ConfigNotFoundError",
    "MessageFormatter",
    "LanguageManager",
    "DisplayNameCache",
    "chain_from_expression",
    "default_property_name_resolver",
    "default_display_name_resolver",
    "default_error_code_resolver",
    "ValidatorSelectorOptions",
    "DefaultValidatorSelector",
    "MemberNameValidatorSelector",
    "RulesetValidatorSelector",
]
