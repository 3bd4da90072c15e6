"""Value patterns for type inference.

Patterns are loaded from config/patterns/default.yaml. A pattern only
decides the lexical shape of a value. Whether the value is actually usable
(a real calendar date, a finite number) is decided by the parsers in
dataprism.analysis.typing.inference.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from dataprism.core.config import get_settings
from dataprism.core.models.base import ColumnKind


@dataclass
class Pattern:
    """A named regex that recognises one value shape."""

    name: str
    pattern: str
    inferred_kind: ColumnKind
    parse_format: str | list[str] | None = None  # strptime format(s); None = ISO 8601
    case_sensitive: bool = True
    examples: list[str] = field(default_factory=list)

    _regex: re.Pattern[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        flags = 0 if self.case_sensitive else re.IGNORECASE
        self._regex = re.compile(self.pattern, flags)

    @classmethod
    def from_dict(cls, entry: dict[str, Any]) -> Pattern:
        """Build a pattern from one YAML entry.

        Raises:
            KeyError: If name, pattern or inferred_kind is missing
            ValueError: If inferred_kind is not a ColumnKind value
            re.error: If the regex does not compile
        """
        return cls(
            name=entry["name"],
            pattern=entry["pattern"],
            inferred_kind=ColumnKind(entry["inferred_kind"]),
            parse_format=entry.get("parse_format"),
            case_sensitive=entry.get("case_sensitive", True),
            examples=list(entry.get("examples") or []),
        )

    def matches(self, value: str) -> bool:
        """Check whether a non-empty string has this pattern's shape."""
        if not value:
            return False
        return self._regex.match(value) is not None

    def parse(self, value: str) -> datetime | None:
        """Parse a matching value into a datetime.

        Returns None when the value does not name a real point in time
        (e.g. "2024-02-30" matches the ISO shape but is not a date).
        A list of formats is tried in order; the first that parses wins.
        """
        if not self.parse_format:
            try:
                return datetime.fromisoformat(value)
            except ValueError:
                return None

        formats = [self.parse_format] if isinstance(self.parse_format, str) else self.parse_format
        for fmt in formats:
            try:
                return datetime.strptime(value, fmt)
            except ValueError:
                continue
        return None

    def failing_examples(self) -> list[str]:
        """Documented examples that this pattern does not match."""
        return [example for example in self.examples if not self.matches(example)]


class PatternConfig:
    """Date and numeric patterns, in match priority order.

    Entries that are incomplete or invalid are skipped so that one bad
    pattern does not disable inference.
    """

    def __init__(self, config_dict: dict[str, Any] | None):
        config_dict = config_dict or {}
        self._date_patterns = self._build(config_dict.get("date_patterns"))
        self._numeric_patterns = self._build(config_dict.get("numeric_patterns"))

    @staticmethod
    def _build(entries: list[dict[str, Any]] | None) -> list[Pattern]:
        patterns = []
        for entry in entries or []:
            try:
                patterns.append(Pattern.from_dict(entry))
            except (KeyError, ValueError, re.error):
                continue
        return patterns

    def get_date_patterns(self) -> list[Pattern]:
        """Date patterns, first match wins."""
        return self._date_patterns

    def get_numeric_patterns(self) -> list[Pattern]:
        """Numeric patterns."""
        return self._numeric_patterns

    def match_date(self, value: str) -> Pattern | None:
        """Return the first date pattern matching value, or None."""
        return next((p for p in self._date_patterns if p.matches(value)), None)

    def is_numeric(self, value: str) -> bool:
        """Check whether a value has the lexical form of a number."""
        return any(pattern.matches(value) for pattern in self._numeric_patterns)


def load_pattern_config(config_path: Path | None = None) -> PatternConfig:
    """Load pattern configuration from YAML.

    Args:
        config_path: YAML file. Defaults to patterns/default.yaml under
            settings.config_path.

    Returns:
        PatternConfig instance
    """
    if config_path is None:
        config_path = get_settings().config_path / "patterns" / "default.yaml"

    with open(config_path) as f:
        return PatternConfig(yaml.safe_load(f))


@lru_cache
def get_pattern_config() -> PatternConfig:
    """Get the cached default pattern configuration."""
    return load_pattern_config()
