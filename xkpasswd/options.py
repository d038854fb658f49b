# Padding, CaseTransform, CharChoice
# (enumerated configuration values)
#

import enum

from .errors import InvalidConfiguration


class _ParseMixin:

    @classmethod
    def parse(cls, text: str):
        """Look up a member by its name, ignoring case, `-` and `_`."""
        key = text.strip().replace('-', '').replace('_', '').upper()
        for member in cls:
            if member.name.replace('_', '') == key:
                return member
        raise InvalidConfiguration(cls.__name__, text, "unknown value")


class Padding(_ParseMixin, enum.Enum):
    NONE = 'none'
    FIXED = 'fixed'
    ADAPTIVE = 'adaptive'


class CaseTransform(_ParseMixin, enum.Enum):
    NONE = 'none'
    UPPER = 'upper'
    LOWER = 'lower'
    CAPITALIZE = 'capitalize'
    INVERT = 'invert'
    ALTERNATE = 'alternate'
    RANDOM = 'random'


class CharChoice:

    """Separator or padding character setting.

    One of three kinds:

    * RANDOM: pick a character at random when generating
    * NONE: no character at all
    * fixed: always use the given character

    """

    __slots__ = ('kind', 'char')

    def __init__(self, kind, char=None):
        self.kind = kind
        self.char = char

    @classmethod
    def fixed(cls, char: str) -> 'CharChoice':
        if not isinstance(char, str) or len(char) != 1 or char == '\0':
            raise InvalidConfiguration('char', char, "expected single character")
        return cls('fixed', char)

    @classmethod
    def coerce(cls, value) -> 'CharChoice':
        """Convert plain values: None is random, NUL or '' is none."""
        if isinstance(value, CharChoice):
            return value
        if value is None:
            return cls.RANDOM
        if value in ('\0', ''):
            return cls.NONE
        return cls.fixed(value)

    @classmethod
    def parse(cls, text: str) -> 'CharChoice':
        """Parse value from config file: `random`, `none` or a character."""
        if len(text) == 1:
            return cls.fixed(text)
        stripped = text.strip()
        if stripped.lower() == 'random':
            return cls.RANDOM
        if stripped.lower() == 'none':
            return cls.NONE
        if len(stripped) == 1:
            return cls.fixed(stripped)
        raise InvalidConfiguration('char', text, "expected 'random', 'none' or single character")

    @property
    def is_random(self):
        return self.kind == 'random'

    @property
    def is_none(self):
        return self.kind == 'none'

    @property
    def is_fixed(self):
        return self.kind == 'fixed'

    def __eq__(self, other):
        if not isinstance(other, CharChoice):
            return NotImplemented
        return (self.kind, self.char) == (other.kind, other.char)

    def __hash__(self):
        return hash((self.kind, self.char))

    def __repr__(self):
        if self.is_fixed:
            return f"CharChoice.fixed({self.char!r})"
        return f"CharChoice.{self.kind.upper()}"


CharChoice.RANDOM = CharChoice('random')
CharChoice.NONE = CharChoice('none')
