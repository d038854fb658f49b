import logging
import pytest

from xkpasswd.config import Configuration, parse_substitutions
from xkpasswd.errors import InvalidConfiguration
from xkpasswd.options import Padding, CaseTransform, CharChoice


def test_defaults():
    cfg = Configuration()
    assert cfg.word_list_path == '?en.gz'
    assert cfg.symbol_alphabet == frozenset('!@$%^&*-_+=:|~?')
    assert cfg.separator_alphabet == frozenset()
    assert (cfg.min_word_length, cfg.max_word_length) == (4, 8)
    assert cfg.word_count == 4
    assert cfg.separator_character == CharChoice.RANDOM
    assert (cfg.padding_digits_before, cfg.padding_digits_after) == (2, 2)
    assert cfg.padding_type == Padding.FIXED
    assert cfg.padding_character == CharChoice.RANDOM
    assert (cfg.padding_characters_before, cfg.padding_characters_after) == (2, 2)
    assert cfg.pad_to_length == 0
    assert cfg.case_transform == CaseTransform.CAPITALIZE
    assert cfg.character_substitutions == {}


def test_word_length_bounds_self_order():
    a = Configuration(min_word_length=8, max_word_length=4)
    b = Configuration(max_word_length=4, min_word_length=8)
    c = Configuration(min_word_length=4, max_word_length=8)
    for cfg in (a, b, c):
        assert (cfg.min_word_length, cfg.max_word_length) == (4, 8)


@pytest.mark.parametrize('field, value', [
    ('min_word_length', 0),
    ('max_word_length', -3),
    ('word_count', 0),
    ('padding_digits_before', -1),
    ('padding_digits_after', -1),
    ('padding_characters_before', -1),
    ('padding_characters_after', -2),
    ('word_count', 2.5),
    ('word_count', True),
    ('symbol_alphabet', ''),
    ('symbol_alphabet', ['ab']),
    ('separator_character', 'ab'),
    ('padding_character', 5),
    ('character_substitutions', {'a': 'bc'}),
    ('padding_type', 'sideways'),
    ('case_transform', 42),
    ('symbol_alphabet', 5),
    ('separator_alphabet', [['-']]),
    ('character_substitutions', 'ab'),
    ('character_substitutions', 5),
    ('word_list_path', None),
    ('word_list_path', ''),
])
def test_invalid_value_keeps_previous(field, value):
    cfg = Configuration()
    previous = getattr(cfg, field)
    with pytest.raises(InvalidConfiguration):
        setattr(cfg, field, value)
    assert getattr(cfg, field) == previous


def test_zero_padding_is_valid():
    cfg = Configuration(padding_digits_before=0, padding_characters_after=0,
                        pad_to_length=-5)
    assert cfg.padding_digits_before == 0
    assert cfg.padding_characters_after == 0
    assert cfg.pad_to_length == -5


def test_unknown_field():
    with pytest.raises(TypeError):
        Configuration(colour='red')


def test_char_choice():
    assert CharChoice.coerce(None) == CharChoice.RANDOM
    assert CharChoice.coerce('\0') == CharChoice.NONE
    assert CharChoice.coerce('') == CharChoice.NONE
    assert CharChoice.coerce('-') == CharChoice.fixed('-')
    assert CharChoice.coerce('-').char == '-'
    assert CharChoice.parse('Random') is CharChoice.RANDOM
    assert CharChoice.parse('none') is CharChoice.NONE
    assert CharChoice.parse('N') == CharChoice.fixed('N')
    assert repr(CharChoice.fixed('+')) == "CharChoice.fixed('+')"
    with pytest.raises(InvalidConfiguration):
        CharChoice.parse('dash')


def test_enum_parse():
    assert CaseTransform.parse('capitalize') == CaseTransform.CAPITALIZE
    assert CaseTransform.parse('UPPER') == CaseTransform.UPPER
    assert Padding.parse('Adaptive') == Padding.ADAPTIVE
    cfg = Configuration(padding_type='none', case_transform='alternate')
    assert cfg.padding_type == Padding.NONE
    assert cfg.case_transform == CaseTransform.ALTERNATE


def test_substitutions_are_copied_and_ordered():
    subs = {'o': '0', 'a': '@'}
    cfg = Configuration(character_substitutions=subs)
    subs['e'] = '3'
    assert list(cfg.character_substitutions.items()) == [('o', '0'), ('a', '@')]


def test_parse_substitutions():
    assert parse_substitutions("a:@, o:0 s:$") == {'a': '@', 'o': '0', 's': '$'}
    assert parse_substitutions(",:; ::,") == {',': ';', ':': ','}
    assert parse_substitutions("") == {}
    with pytest.raises(InvalidConfiguration):
        parse_substitutions("abc")


def test_load(tmp_path, caplog):
    config_file = tmp_path / 'xkpasswd.conf'
    config_file.write_text("""
[xkpasswd]
word_count = 3
min_word_length = 6
separator_character = none
padding_character = #
padding_type = adaptive
pad_to_length = 32
case_transform = upper
character_substitutions = A:@, O:0
symbol_alphabet = %&
colour = red

[other]
key = value
""", encoding='utf-8')
    with caplog.at_level(logging.WARNING):
        cfg = Configuration.from_file(config_file)
    assert cfg.word_count == 3
    assert (cfg.min_word_length, cfg.max_word_length) == (6, 8)
    assert cfg.separator_character == CharChoice.NONE
    assert cfg.padding_character == CharChoice.fixed('#')
    assert cfg.padding_type == Padding.ADAPTIVE
    assert cfg.pad_to_length == 32
    assert cfg.case_transform == CaseTransform.UPPER
    assert cfg.character_substitutions == {'A': '@', 'O': '0'}
    assert cfg.symbol_alphabet == frozenset('%&')
    assert "unknown key [xkpasswd] 'colour'" in caplog.text
    assert "unknown section 'other'" in caplog.text


def test_load_invalid(tmp_path):
    config_file = tmp_path / 'xkpasswd.conf'
    config_file.write_text("[xkpasswd]\nword_count = many\n", encoding='utf-8')
    with pytest.raises(InvalidConfiguration):
        Configuration.from_file(config_file)
    config_file.write_text("[xkpasswd]\nword_count = 0\n", encoding='utf-8')
    with pytest.raises(InvalidConfiguration):
        Configuration.from_file(config_file)


def test_load_missing_file_keeps_defaults(tmp_path):
    cfg = Configuration(word_count=5).load(tmp_path / 'missing.conf')
    assert cfg.word_count == 5


def test_substitutions_are_read_only():
    cfg = Configuration(character_substitutions={'a': '@'})
    with pytest.raises(TypeError):
        cfg.character_substitutions['a'] = 'XYZ'
    assert cfg.character_substitutions == {'a': '@'}
    cfg.character_substitutions = dict(cfg.character_substitutions, o='0')
    assert cfg.character_substitutions == {'a': '@', 'o': '0'}


def test_word_list_path(tmp_path):
    cfg = Configuration(word_list_path=tmp_path / 'words')
    assert cfg.word_list_path == tmp_path / 'words'
    cfg.word_list_path = '?en.gz'
    assert cfg.word_list_path == '?en.gz'
