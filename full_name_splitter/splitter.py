"""
Full Name Splitting Module

Splits a free-form Western full name into an honorific, a first (given) name and a last
(family) name, and composes the three parts back into a display string.

## Overview

The core is the `Splitter` class, a single left-to-right scan over whitespace separated
tokens. Each token is classified by the first matching rule:

1. **Honorific**: the very first token, when requested and found in `HONORIFICS`
2. **Prefix**: a surname particle from `PREFIXES` ("van", "de", "mc", ...)
3. **Apostrophe**: a token such as "O'Connor" or "d'Artagnan"
4. **Trailing surname**: the last token once a first name exists, unless it is an initial
5. **Honorific surname**: the last token after an honorific with no first name yet
6. **First name**: everything else

Rules 2 to 5 stop the scan; the remaining tokens are drained into the last name. A final
pass adjusts a few multi-word surname exceptions ("Mies van der Rohe", "Reyes de la Barrera").

## Usage Examples

```python
from full_name_splitter import split, split_with_honorific, compose

split("Kevin J. O'Connor")
# Returns: SplitResult(honorific=None, first_name="Kevin J.", last_name="O'Connor")

split_with_honorific("Dr. Ludwig Mies van der Rohe")
# Returns: SplitResult(honorific="Dr", first_name="Ludwig", last_name="Mies van der Rohe")

# A comma separates the given names from a verbatim surname
split("Ludwig Mies, van der Rohe")
# Returns: SplitResult(honorific=None, first_name="Ludwig Mies", last_name="van der Rohe")

compose("Dr", "Ludwig", "Mies van der Rohe")
# Returns: "Dr. Ludwig Mies van der Rohe"
```

## Thread Safety

Splitting is stateless per call. The rule tables and `SplitterConfig` are immutable and can
be shared freely between threads.
"""

from __future__ import annotations
import logging
import re
from collections import deque
from dataclasses import dataclass, replace
from enum import Enum
from typing import Deque, Dict, FrozenSet, List, NamedTuple, Optional, Tuple

from full_name_splitter.splitter_data import (
    PREFIXES,
    HONORIFICS,
    INITIAL_PATTERN,
    APOSTROPHE_PATTERN,
    NON_WORD_PATTERN,
    SURNAME_EXCEPTION_PATTERN,
    EXCEPTION_FIRST_NAME_LIMIT,
)


class InvalidNameError(TypeError):
    """Raised when something other than a string is given as a name."""


# ════════════════════════════════════════════════════════════════════════════════
# RESULT TYPES
# ════════════════════════════════════════════════════════════════════════════════


class SplitResult(NamedTuple):
    """Ordered (honorific, first_name, last_name) triple; equal to the plain tuple of its parts."""

    honorific: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    def as_tuple(self) -> Tuple[Optional[str], Optional[str], Optional[str]]:
        return (self.honorific, self.first_name, self.last_name)

    @property
    def is_empty(self) -> bool:
        return self.honorific is None and self.first_name is None and self.last_name is None


class Rule(Enum):
    """Which rule placed a token, as recorded in `Splitter.trace`."""

    HONORIFIC = "honorific"
    PREFIX = "prefix"
    APOSTROPHE = "apostrophe"
    TRAILING_SURNAME = "trailing_surname"
    HONORIFIC_SURNAME = "honorific_surname"
    FIRST_NAME = "first_name"
    DRAIN = "drain"
    EXCEPTION = "exception"


# Rules that end the scan and send the rest of the tokens to the last name
SURNAME_RULES = frozenset({Rule.PREFIX, Rule.APOSTROPHE, Rule.TRAILING_SURNAME, Rule.HONORIFIC_SURNAME})


class ScanState(Enum):
    SCANNING = "scanning"
    DRAINING = "draining"


# ════════════════════════════════════════════════════════════════════════════════
# IMMUTABLE CONFIGURATION DATA
# ════════════════════════════════════════════════════════════════════════════════


def _compile_word_patterns(unicode_words: bool) -> Dict[str, re.Pattern[str]]:
    """Patterns that depend on what `\\w` means."""
    flags = 0 if unicode_words else re.ASCII
    return {
        "initial_pattern": re.compile(INITIAL_PATTERN, flags),
        "apostrophe_pattern": re.compile(APOSTROPHE_PATTERN, flags),
        "non_word_pattern": re.compile(NON_WORD_PATTERN, flags),
        "exception_pattern": re.compile(SURNAME_EXCEPTION_PATTERN, flags | re.IGNORECASE),
    }


@dataclass(frozen=True)
class SplitterConfig:
    """Immutable rule tables and precompiled patterns used by the splitter."""

    # Rule tables (lowercase)
    prefixes: FrozenSet[str]
    honorifics: FrozenSet[str]

    # ASCII `\w` unless switched with with_unicode_words()
    unicode_words: bool

    # Precompiled regex patterns (immutable)
    initial_pattern: re.Pattern[str]
    apostrophe_pattern: re.Pattern[str]
    non_word_pattern: re.Pattern[str]
    exception_pattern: re.Pattern[str]
    whitespace_pattern: re.Pattern[str]
    comma_pattern: re.Pattern[str]

    exception_first_name_limit: int

    @classmethod
    def create_default(cls) -> "SplitterConfig":
        """Factory method for the default configuration."""
        return cls(
            prefixes=PREFIXES,
            honorifics=HONORIFICS,
            unicode_words=False,
            whitespace_pattern=re.compile(r"\s+"),
            comma_pattern=re.compile(r"\s*,\s*"),
            exception_first_name_limit=EXCEPTION_FIRST_NAME_LIMIT,
            **_compile_word_patterns(False),
        )

    def with_prefixes(self, *prefixes: str) -> "SplitterConfig":
        """Immutable update adding surname particles."""
        return replace(self, prefixes=self.prefixes | frozenset(p.lower() for p in prefixes))

    def with_honorifics(self, *honorifics: str) -> "SplitterConfig":
        """Immutable update adding titles."""
        return replace(self, honorifics=self.honorifics | frozenset(h.lower() for h in honorifics))

    def with_unicode_words(self, enabled: bool = True) -> "SplitterConfig":
        """Immutable update switching `\\w` between ASCII and Unicode word characters."""
        return replace(self, unicode_words=enabled, **_compile_word_patterns(enabled))


DEFAULT_CONFIG = SplitterConfig.create_default()


def _require_text(name: Optional[str]) -> str:
    if name is None:
        return ""
    if not isinstance(name, str):
        raise InvalidNameError(f"name must be a string, got {type(name).__name__}")
    return name


# ════════════════════════════════════════════════════════════════════════════════
# TOKENIZER / CLASSIFIER
# ════════════════════════════════════════════════════════════════════════════════


class Splitter:
    """Classifies the tokens of one name into honorific, first name and last name.

    Splitting happens on construction. Results are read from `honorific`, `first_name`,
    `last_name` or `result`; `trace` lists every token with the rule that placed it.
    """

    def __init__(self, full_name: Optional[str], honorific: bool = False, config: Optional[SplitterConfig] = None):
        self._config = config or DEFAULT_CONFIG
        self._full_name = _require_text(full_name)
        self._want_honorific = honorific
        self._honorific: List[str] = []
        self._first_name: List[str] = []
        self._last_name: List[str] = []
        self._units: Deque[str] = deque()
        self._state = ScanState.SCANNING
        self.trace: List[Tuple[str, Rule]] = []

        self._split()

    @property
    def honorific(self) -> Optional[str]:
        if not self._honorific:
            return None
        return self._config.non_word_pattern.sub("", self._honorific[0])

    @property
    def first_name(self) -> Optional[str]:
        return " ".join(self._first_name) if self._first_name else None

    @property
    def last_name(self) -> Optional[str]:
        return " ".join(self._last_name) if self._last_name else None

    @property
    def result(self) -> SplitResult:
        return SplitResult(self.honorific, self.first_name, self.last_name)

    def _split(self) -> None:
        self._units = deque(self._full_name.split())

        while self._state is ScanState.SCANNING and self._units:
            unit = self._units.popleft()
            rule = self._classify(unit)
            self.trace.append((unit, rule))
            logging.debug(f"Token '{unit}' classified by {rule.value} rule")

            if rule is Rule.HONORIFIC:
                self._honorific.append(unit)
            elif rule is Rule.FIRST_NAME:
                self._first_name.append(unit)
            else:
                self._last_name.append(unit)
                self._state = ScanState.DRAINING

        self._drain()
        self._adjust_exceptions()

    def _classify(self, unit: str) -> Rule:
        """Return the first rule matching `unit`; tokens still queued are visible as look-ahead."""
        if self._is_honorific(unit):
            return Rule.HONORIFIC
        if self._is_prefix(unit):
            return Rule.PREFIX
        if self._has_apostrophe(unit):
            return Rule.APOSTROPHE
        if self._first_name and self._is_last_unit() and not self._is_initial(unit):
            return Rule.TRAILING_SURNAME
        if self._has_honorific() and self._is_last_unit() and not self._first_name:
            return Rule.HONORIFIC_SURNAME
        return Rule.FIRST_NAME

    def _drain(self) -> None:
        """Move every unvisited token to the last name. Empty unless a surname rule fired."""
        while self._units:
            unit = self._units.popleft()
            self._last_name.append(unit)
            self.trace.append((unit, Rule.DRAIN))
            logging.debug(f"Token '{unit}' drained into last name")

    def _is_honorific(self, unit: str) -> bool:
        if not self._want_honorific or self._honorific or self._first_name or self._last_name:
            return False
        return self._config.non_word_pattern.sub("", unit.lower()) in self._config.honorifics

    def _has_honorific(self) -> bool:
        return bool(self._honorific)

    def _is_prefix(self, unit: str) -> bool:
        return unit.lower() in self._config.prefixes

    def _is_initial(self, unit: str) -> bool:
        return self._config.initial_pattern.search(unit) is not None

    def _has_apostrophe(self, unit: str) -> bool:
        return self._config.apostrophe_pattern.search(unit) is not None

    def _is_last_unit(self) -> bool:
        return not self._units

    def _adjust_exceptions(self) -> None:
        """Pull given-name tokens into a few known multi-word surnames.

        "Ludwig Mies van der Rohe"                   => "Ludwig",     "Mies van der Rohe"
        "Juan Martín de la Cruz Gómez"               => "Juan Martín", "de la Cruz Gómez" (unchanged)
        "Javier Reyes de la Barrera"                 => "Javier",     "Reyes de la Barrera"
        "Rosa María Pérez Martínez Vda. de la Cruz"  => "Rosa María", "Pérez Martínez Vda. de la Cruz"
        """
        if len(self._first_name) <= 1:
            return
        if not self._config.exception_pattern.search(" ".join(self._last_name)):
            return

        # At least one token moves, even when the first name is already short enough
        while True:
            unit = self._first_name.pop()
            self._last_name.insert(0, unit)
            self.trace.append((unit, Rule.EXCEPTION))
            if len(self._first_name) <= self._config.exception_first_name_limit:
                break

        logging.debug(f"Adjusted surname exception for '{self._full_name}': last name '{self.last_name}'")


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# ════════════════════════════════════════════════════════════════════════════════


def split(name: Optional[str], honorific: bool = False, config: Optional[SplitterConfig] = None) -> SplitResult:
    """
    Split a full name into (honorific, first_name, last_name).

    Args:
        name: Full name. None counts as an empty name.
        honorific: Extract a leading title such as "Dr." when True
        config: Rule tables and patterns; the default configuration when omitted

    Returns:
        SplitResult. Missing parts are None; nothing is raised for any string.

    Text before a comma is split on its own and becomes the first name as a whole, and text
    after the comma is the last name verbatim ("Ludwig Mies, van der Rohe").

    Raises:
        InvalidNameError: name is neither a string nor None
    """
    config = config or DEFAULT_CONFIG
    name = config.whitespace_pattern.sub(" ", _require_text(name).strip())

    if "," not in name:
        return Splitter(name, honorific, config).result

    # ",van  helsing" produces ["", "van helsing"], read as [None, "van helsing"]
    before, after = (segment or None for segment in config.comma_pattern.split(name, maxsplit=1))
    if before is None:
        return SplitResult(None, None, after)

    splitter = Splitter(before, honorific, config)
    first_name = " ".join(part for part in (splitter.first_name, splitter.last_name) if part) or None
    logging.debug(f"Split '{name}' at comma: first name '{first_name}', last name '{after}'")
    return SplitResult(splitter.honorific, first_name, after)


def split_with_honorific(name: Optional[str], config: Optional[SplitterConfig] = None) -> SplitResult:
    """Same as split(name, honorific=True)."""
    return split(name, True, config)


def compose(honorific: Optional[str], first_name: Optional[str], last_name: Optional[str]) -> str:
    """Join the present parts into a display name: "<honorific>. <first_name> <last_name>"."""
    parts = [f"{honorific}." if honorific else None, first_name, last_name]
    return " ".join(part for part in parts if part)
