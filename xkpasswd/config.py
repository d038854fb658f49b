# Configuration
# (generator settings with validation)
#

import os
import types
import logging
import configparser
from pathlib import Path

from .errors import InvalidConfiguration
from .options import Padding, CaseTransform, CharChoice

log = logging.getLogger(__name__)

CONFIG_SECTION = 'xkpasswd'

DEFAULT_WORD_LIST = '?en.gz'
DEFAULT_SYMBOL_ALPHABET = '!@$%^&*-_+=:|~?'
MIN_WORD_LENGTH = 4
MAX_WORD_LENGTH = 8
WORD_COUNT = 4
PADDING_DIGITS = 2
PADDING_CHARACTERS = 2


def _check_int(field, value, minimum):
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidConfiguration(field, value, "expected integer")
    if minimum is not None and value < minimum:
        raise InvalidConfiguration(field, value, f"cannot be less than {minimum}")
    return value


def _check_alphabet(field, value) -> frozenset:
    if value is None:
        return frozenset()
    try:
        chars = frozenset(value)
    except TypeError as e:
        raise InvalidConfiguration(field, value, str(e)) from e
    if not all(isinstance(c, str) and len(c) == 1 for c in chars):
        raise InvalidConfiguration(field, value, "expected single characters")
    return chars


def _check_substitutions(value) -> dict:
    if value is None:
        return {}
    try:
        subs = dict(value)
    except (TypeError, ValueError) as e:
        raise InvalidConfiguration('character_substitutions', value, str(e)) from e
    for key, sub in subs.items():
        for c in (key, sub):
            if not isinstance(c, str) or len(c) != 1:
                raise InvalidConfiguration('character_substitutions', value,
                                           f"{c!r} is not a single character")
    return subs


def parse_substitutions(text: str) -> dict:
    """Parse substitutions from config file.

    The format is whitespace delimited pairs of `<find>:<replace>`,
    optionally terminated by comma, e.g. ``a:@, o:0, s:$``.

    """
    subs = {}
    for item in text.split():
        if len(item) == 4 and item.endswith(','):
            item = item[:3]
        if len(item) != 3 or item[1] != ':':
            raise InvalidConfiguration('character_substitutions', text,
                                       f"bad pair {item!r}")
        subs[item[0]] = item[2]
    return subs


class Configuration:

    """Settings of the passphrase generator.

    All fields are validated on assignment. Invalid value raises
    :class:`InvalidConfiguration` and the field keeps its previous value.

    The configuration is read again by every call to generate,
    so it may be changed between the calls.

    """

    # name -> parser of config file value
    _file_fields = {
        'word_list_path': str,
        'symbol_alphabet': str,
        'separator_alphabet': str,
        'min_word_length': int,
        'max_word_length': int,
        'word_count': int,
        'separator_character': CharChoice.parse,
        'padding_digits_before': int,
        'padding_digits_after': int,
        'padding_type': Padding.parse,
        'padding_character': CharChoice.parse,
        'padding_characters_before': int,
        'padding_characters_after': int,
        'pad_to_length': int,
        'case_transform': CaseTransform.parse,
        'character_substitutions': parse_substitutions,
    }

    def __init__(self, **fields):
        self.word_list_path = DEFAULT_WORD_LIST
        self.symbol_alphabet = DEFAULT_SYMBOL_ALPHABET
        self.separator_alphabet = None
        self._min_word_length = MIN_WORD_LENGTH
        self._max_word_length = MAX_WORD_LENGTH
        self.word_count = WORD_COUNT
        self.separator_character = CharChoice.RANDOM
        self.padding_digits_before = PADDING_DIGITS
        self.padding_digits_after = PADDING_DIGITS
        self.padding_type = Padding.FIXED
        self.padding_character = CharChoice.RANDOM
        self.padding_characters_before = PADDING_CHARACTERS
        self.padding_characters_after = PADDING_CHARACTERS
        self.pad_to_length = 0
        self.case_transform = CaseTransform.CAPITALIZE
        self.character_substitutions = {}
        for name, value in fields.items():
            if name not in self._file_fields:
                raise TypeError(f"Configuration got an unexpected field {name!r}")
            setattr(self, name, value)

    def __repr__(self):
        a = ('{}={!r}'.format(name, getattr(self, name))
             for name in self._file_fields)
        return "{}({})".format(self.__class__.__name__, ', '.join(a))

    @classmethod
    def from_file(cls, config_file) -> 'Configuration':
        return cls().load(config_file)

    def load(self, config_file) -> 'Configuration':
        """Update fields from INI file with ``[xkpasswd]`` section."""
        config_file = Path(config_file).expanduser()
        log.debug("Loading config %r", str(config_file))
        config = configparser.ConfigParser(interpolation=None)
        config.read(config_file, encoding='utf-8')
        for section in config.sections():
            if section != CONFIG_SECTION:
                log.warning("unknown section %r in config %r", section, str(config_file))
                continue
            section = config[section]
            for key in section:
                parse = self._file_fields.get(key)
                if parse is None:
                    log.warning("unknown key [%s] %r in config %r",
                                section.name, key, str(config_file))
                    continue
                try:
                    value = parse(section[key])
                except InvalidConfiguration:
                    raise
                except ValueError as e:
                    raise InvalidConfiguration(key, section[key], str(e)) from e
                setattr(self, key, value)
        return self

    @property
    def word_list_path(self):
        """Word list file, or bundled resource name prefixed by "?"."""
        return self._word_list_path

    @word_list_path.setter
    def word_list_path(self, value):
        if not isinstance(value, (str, os.PathLike)) or not str(value):
            raise InvalidConfiguration('word_list_path', value, "expected path")
        self._word_list_path = value

    @property
    def symbol_alphabet(self) -> frozenset:
        """Symbols for random separator and padding characters."""
        return self._symbol_alphabet

    @symbol_alphabet.setter
    def symbol_alphabet(self, value):
        chars = _check_alphabet('symbol_alphabet', value)
        if not chars:
            raise InvalidConfiguration('symbol_alphabet', value, "cannot be empty")
        self._symbol_alphabet = chars

    @property
    def separator_alphabet(self) -> frozenset:
        """Symbols for random separator. When empty, `symbol_alphabet` is used."""
        return self._separator_alphabet

    @separator_alphabet.setter
    def separator_alphabet(self, value):
        self._separator_alphabet = _check_alphabet('separator_alphabet', value)

    @property
    def min_word_length(self) -> int:
        """Effective minimum, i.e. the lesser of the two bounds."""
        return min(self._min_word_length, self._max_word_length)

    @min_word_length.setter
    def min_word_length(self, value):
        self._min_word_length = _check_int('min_word_length', value, 1)

    @property
    def max_word_length(self) -> int:
        """Effective maximum, i.e. the greater of the two bounds."""
        return max(self._min_word_length, self._max_word_length)

    @max_word_length.setter
    def max_word_length(self, value):
        self._max_word_length = _check_int('max_word_length', value, 1)

    @property
    def word_count(self) -> int:
        return self._word_count

    @word_count.setter
    def word_count(self, value):
        self._word_count = _check_int('word_count', value, 1)

    @property
    def separator_character(self) -> CharChoice:
        return self._separator_character

    @separator_character.setter
    def separator_character(self, value):
        self._separator_character = CharChoice.coerce(value)

    @property
    def padding_digits_before(self) -> int:
        return self._padding_digits_before

    @padding_digits_before.setter
    def padding_digits_before(self, value):
        self._padding_digits_before = _check_int('padding_digits_before', value, 0)

    @property
    def padding_digits_after(self) -> int:
        return self._padding_digits_after

    @padding_digits_after.setter
    def padding_digits_after(self, value):
        self._padding_digits_after = _check_int('padding_digits_after', value, 0)

    @property
    def padding_type(self) -> Padding:
        return self._padding_type

    @padding_type.setter
    def padding_type(self, value):
        if isinstance(value, str):
            value = Padding.parse(value)
        if not isinstance(value, Padding):
            raise InvalidConfiguration('padding_type', value, "expected Padding")
        self._padding_type = value

    @property
    def padding_character(self) -> CharChoice:
        """Padding character. Random and none both mean a character is chosen per call."""
        return self._padding_character

    @padding_character.setter
    def padding_character(self, value):
        self._padding_character = CharChoice.coerce(value)

    @property
    def padding_characters_before(self) -> int:
        return self._padding_characters_before

    @padding_characters_before.setter
    def padding_characters_before(self, value):
        self._padding_characters_before = _check_int('padding_characters_before', value, 0)

    @property
    def padding_characters_after(self) -> int:
        return self._padding_characters_after

    @padding_characters_after.setter
    def padding_characters_after(self, value):
        self._padding_characters_after = _check_int('padding_characters_after', value, 0)

    @property
    def pad_to_length(self) -> int:
        """Target length for adaptive padding. No effect when not positive."""
        return self._pad_to_length

    @pad_to_length.setter
    def pad_to_length(self, value):
        self._pad_to_length = _check_int('pad_to_length', value, None)

    @property
    def case_transform(self) -> CaseTransform:
        return self._case_transform

    @case_transform.setter
    def case_transform(self, value):
        if isinstance(value, str):
            value = CaseTransform.parse(value)
        if not isinstance(value, CaseTransform):
            raise InvalidConfiguration('case_transform', value, "expected CaseTransform")
        self._case_transform = value

    @property
    def character_substitutions(self):
        """Read-only view, assign a new mapping to change it."""
        return types.MappingProxyType(self._character_substitutions)

    @character_substitutions.setter
    def character_substitutions(self, value):
        self._character_substitutions = _check_substitutions(value)
