# pwgen
# (passphrase generator composed of dictionary words)
#

import string
import logging
import time
from random import SystemRandom

from .config import Configuration
from .casing import transform_case
from .errors import EmptyCandidateSet, InvalidConfiguration
from .options import Padding, CaseTransform
from .wordlist import read_words

log = logging.getLogger(__name__)


def filter_words(words, min_length: int, max_length: int) -> list:
    """Return words longer than `min_length` and shorter than `max_length`.

    Both bounds are exclusive.

    """
    return [w for w in words if min_length < len(w) < max_length]


def select_words(words, config: Configuration, rng) -> list:
    """Choose `config.word_count` random words of suitable length.

    The words are drawn independently, the same word may be chosen
    more than once.

    """
    min_length, max_length = config.min_word_length, config.max_word_length
    log.debug("Processing wordlist to get words between %d and %d chars",
              min_length, max_length)
    start = time.perf_counter()
    candidates = filter_words(words, min_length, max_length)
    log.debug("Done in %.6fs, %d of %d words suitable",
              time.perf_counter() - start, len(candidates), len(words))
    if not candidates:
        raise EmptyCandidateSet(
            f"None of {len(words)} words is longer than {min_length} "
            f"and shorter than {max_length} characters")
    return [rng.choice(candidates) for _ in range(config.word_count)]


def substitute_characters(words, substitutions: dict) -> list:
    """Replace characters in each word, in order of `substitutions`.

    The replacements are chained: a character introduced by one
    substitution may be replaced again by a following one.

    """
    if not substitutions:
        return list(words)
    result = []
    for word in words:
        for find, replace in substitutions.items():
            word = word.replace(find, replace)
        result.append(word)
    return result


def choose_symbol(alphabet, rng) -> str:
    return rng.choice(sorted(alphabet))


def resolve_separator(config: Configuration, rng) -> str:
    """Get separator for one generated password (may be empty)."""
    sep = config.separator_character
    if sep.is_none:
        return ''
    if sep.is_fixed:
        return sep.char
    return choose_symbol(config.separator_alphabet or config.symbol_alphabet, rng)


def random_digits(count: int, rng) -> str:
    return ''.join(rng.choice(string.digits) for _ in range(count))


def pad_fixed(text: str, separator: str, padding_char: str,
              before: int, after: int) -> str:
    """Add `before` units of padding char + separator, `after` padding chars."""
    return (padding_char + separator) * before + text + padding_char * after


def pad_adaptive(text: str, padding_char: str, length: int) -> str:
    """Pad by `padding_char` or truncate `text` to exactly `length` chars.

    Does nothing when `length` is not positive.

    """
    if length <= 0:
        return text
    if len(text) < length:
        return text + padding_char * (length - len(text))
    return text[:length]


class XkPasswd:

    """Passphrase generator in the style of "correct horse battery staple".

    The password is assembled from random words, with optional
    padding digits around them and padding symbols on both ends::

        --12-Correct-Horse-Battery-Staple-34--

    :param config: Generator settings, default :class:`Configuration`
                   is used when not given.
    :param words: Candidate words. When not given, the word list
                  is read from `config.word_list_path` on each generate.
    :param rng: Source of randomness, an object with interface of
                :class:`random.Random`. Default is :class:`random.SystemRandom`.

    """

    def __init__(self, config: Configuration = None, words=None, rng=None):
        self.config = config if config is not None else Configuration()
        self.words = words
        self.rng = rng if rng is not None else SystemRandom()

    def load_words(self) -> list:
        if self.words is not None:
            return list(self.words)
        return read_words(self.config.word_list_path)

    def _padding_char(self, separator: str) -> str:
        cfg = self.config
        if cfg.padding_character.is_fixed:
            return cfg.padding_character.char
        if cfg.padding_type == Padding.FIXED and separator:
            return separator[0]
        return choose_symbol(cfg.symbol_alphabet, self.rng)

    def generate(self) -> str:
        """Generate single password according to current configuration."""
        cfg, rng = self.config, self.rng
        separator = resolve_separator(cfg, rng)

        words = select_words(self.load_words(), cfg, rng)
        if cfg.case_transform != CaseTransform.NONE:
            words = transform_case(words, cfg.case_transform, rng)
        words = substitute_characters(words, cfg.character_substitutions)

        parts = []
        if cfg.padding_digits_before > 0:
            parts.append(random_digits(cfg.padding_digits_before, rng) + separator)
        parts.append(separator.join(words))
        if cfg.padding_digits_after > 0:
            parts.append(separator + random_digits(cfg.padding_digits_after, rng))
        password = ''.join(parts)

        if cfg.padding_type == Padding.FIXED:
            password = pad_fixed(password, separator, self._padding_char(separator),
                                 cfg.padding_characters_before,
                                 cfg.padding_characters_after)
        elif cfg.padding_type == Padding.ADAPTIVE and cfg.pad_to_length > 0:
            password = pad_adaptive(password, self._padding_char(separator),
                                    cfg.pad_to_length)
        return password

    def generate_many(self, num_passwords: int):
        """Generate `num_passwords` passwords, lazily one by one.

        Each password is generated from scratch, including the reading
        of the word list. An error is raised at the position where
        it occurred.

        """
        if num_passwords < 0:
            raise InvalidConfiguration('num_passwords', num_passwords,
                                       "cannot be negative")
        return (self.generate() for _ in range(num_passwords))


def generate_passphrase(**fields) -> str:
    """Generate one passphrase using default config updated by `fields`."""
    return XkPasswd(Configuration(**fields)).generate()
