"""
strictpass.options
Normalized generation options and the character classes they select.
"""

import string
from dataclasses import dataclass, asdict, field, fields
from enum import Enum
from typing import Any, Dict, Mapping, Union

from .errors import EmptyPool, InvalidOption

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
NUMBERS = string.digits
SYMBOLS = "\\!@#$%^&*()+_-=}{[]|:;\"/?.><,`~'"
SIMILAR_CHARACTERS = "ilLI|`oO0"

# camelCase names accepted from JSON payloads
_ALIASES = {"excludeSimilarCharacters": "exclude_similar_characters"}


class SymbolMode(Enum):
    DISABLED = "disabled"
    DEFAULT = "default"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Symbols:
    """Symbols setting resolved once: off, the canonical set, or an explicit string."""

    mode: SymbolMode
    custom: str = ""

    @classmethod
    def from_value(cls, value: Union[bool, str, "Symbols", None]) -> "Symbols":
        if isinstance(value, Symbols):
            return value
        if isinstance(value, str):
            # an empty explicit string enables nothing
            return cls(SymbolMode.CUSTOM, value) if value else cls(SymbolMode.DISABLED)
        if isinstance(value, bool) or value is None:
            return cls(SymbolMode.DEFAULT) if value else cls(SymbolMode.DISABLED)
        raise InvalidOption(f"symbols must be a bool or a string, got {type(value).__name__}")

    @property
    def enabled(self) -> bool:
        return self.mode is not SymbolMode.DISABLED

    @property
    def chars(self) -> str:
        if self.mode is SymbolMode.CUSTOM:
            return self.custom
        if self.mode is SymbolMode.DEFAULT:
            return SYMBOLS
        return ""

    def to_value(self) -> Union[bool, str]:
        if self.mode is SymbolMode.CUSTOM:
            return self.custom
        return self.enabled


@dataclass(frozen=True)
class CharacterClass:
    name: str
    chars: str

    def matches(self, password: str) -> bool:
        return any(c in self.chars for c in password)


@dataclass(frozen=True)
class Options:
    length: int = 10
    numbers: bool = False
    symbols: Symbols = field(default_factory=lambda: Symbols(SymbolMode.DISABLED))
    exclude: str = ""
    uppercase: bool = True
    lowercase: bool = True
    exclude_similar_characters: bool = False
    strict: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise InvalidOption("length must be an integer")
        if self.length <= 0:
            raise InvalidOption("length must be > 0")
        if not isinstance(self.exclude, str):
            raise InvalidOption("exclude must be a string")
        for name in ("numbers", "uppercase", "lowercase", "exclude_similar_characters", "strict"):
            if not isinstance(getattr(self, name), bool):
                raise InvalidOption(f"{name} must be true or false")
        object.__setattr__(self, "symbols", Symbols.from_value(self.symbols))

        if not (self.lowercase or self.uppercase or self.numbers or self.symbols.enabled):
            raise EmptyPool("At least one of lowercase, uppercase, numbers or symbols must be enabled")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Options":
        """Build options from a plain mapping (JSON body, saved config). Missing keys take defaults."""
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in (data or {}).items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise InvalidOption(f"unknown option: {key}")
            kwargs[name] = value
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["symbols"] = self.symbols.to_value()
        return out

    def character_classes(self):
        """Enabled classes in pool order: lowercase, uppercase, numbers, symbols."""
        classes = []
        if self.lowercase:
            classes.append(CharacterClass("lowercase", LOWERCASE))
        if self.uppercase:
            classes.append(CharacterClass("uppercase", UPPERCASE))
        if self.numbers:
            classes.append(CharacterClass("numbers", NUMBERS))
        if self.symbols.enabled:
            classes.append(CharacterClass("symbols", self.symbols.chars))
        return classes

    @property
    def min_strict_length(self) -> int:
        # lowercase is always counted as the baseline class
        return 1 + int(self.numbers) + int(self.symbols.enabled) + int(self.uppercase)
