from __future__ import annotations

import logging
import threading
from typing import Dict, Optional

logger = logging.getLogger("validator_options.localization")
logger.addHandler(logging.NullHandler())

__all__ = ["LanguageManager", "DEFAULT_CULTURE"]

DEFAULT_CULTURE = "en"

_ENGLISH: Dict[str, str] = {
    "NotNullValidator": "'{PropertyName}' must not be empty.",
    "NotEmptyValidator": "'{PropertyName}' must not be empty.",
    "EqualValidator": "'{PropertyName}' must be equal to '{ComparisonValue}'.",
    "NotEqualValidator": "'{PropertyName}' must not be equal to '{ComparisonValue}'.",
    "LengthValidator": "'{PropertyName}' must be between {MinLength} and {MaxLength} characters.",
    "RegularExpressionValidator": "'{PropertyName}' is not in the correct format.",
    "EmailValidator": "'{PropertyName}' is not a valid email address.",
    "PredicateValidator": "The specified condition was not met for '{PropertyName}'.",
}


class LanguageManager:
    """
    In-memory message catalog keyed by culture and message key.

    Lookups fall back from the requested culture to its neutral culture
    (``"fr-CA"`` -> ``"fr"``) and then to English. When disabled, English is
    always used.
    """

    def __init__(self, culture: Optional[str] = None, enabled: bool = True) -> None:
        self._lock = threading.RLock()
        self._translations: Dict[str, Dict[str, str]] = {DEFAULT_CULTURE: dict(_ENGLISH)}
        self.culture = culture
        self.enabled = enabled

    def add_translation(self, culture: str, key: str, message: str) -> None:
        if not culture or not key:
            raise ValueError("culture and key must be non-empty strings")
        with self._lock:
            self._translations.setdefault(culture.lower(), {})[key] = message
        logger.debug("Translation added culture=%r key=%r", culture, key)

    def clear(self) -> None:
        with self._lock:
            self._translations = {DEFAULT_CULTURE: dict(_ENGLISH)}

    def get_string(self, key: str, culture: Optional[str] = None) -> str:
        if not self.enabled:
            return self._translations[DEFAULT_CULTURE].get(key, "")
        requested = (culture or self.culture or DEFAULT_CULTURE).lower()
        candidates = [requested]
        if "-" in requested:
            candidates.append(requested.split("-", 1)[0])
        candidates.append(DEFAULT_CULTURE)
        for candidate in candidates:
            message = self._translations.get(candidate, {}).get(key)
            if message is not None:
                return message
        logger.debug("No message for key=%r culture=%r", key, requested)
        return ""

    def __repr__(self) -> str:
        return f"<LanguageManager culture={self.culture!r} enabled={self.enabled}>"
