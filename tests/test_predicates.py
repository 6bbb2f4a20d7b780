import pytest

from pystr import predicates

SAMPLES = [
    '', 'abc', 'ABC', 'aBc', 'abc123', '123', '½', '²', ' \t\n', 'a b',
    'Hello World', 'Hello world', 'hello World', 'HELLO', 'A1b', 'Ab1C', "They'Re",
    'été', '\x00', '\x7f', 'ǅ', 'ǅa', '١٢', '123abc ',
]

NAMES = [
    'isalnum', 'isalpha', 'isascii', 'isdecimal', 'isdigit', 'islower',
    'isnumeric', 'isprintable', 'isspace', 'istitle', 'isupper',
]


@pytest.mark.parametrize('name', NAMES)
def test_predicate_matches_str(name):
    func = getattr(predicates, name)
    for text in SAMPLES:
        assert func(text) == getattr(text, name)(), repr(text)


def test_empty():
    assert not predicates.isalnum('')
    assert not predicates.isspace('')
    assert not predicates.istitle('')
    assert not predicates.islower('')
    assert predicates.isascii('')
    assert predicates.isprintable('')


def test_cased_required():
    assert not predicates.islower('123')
    assert predicates.islower('abc123')
    assert not predicates.isupper('1 2')
    assert predicates.isupper('A1')


def test_titlecase_letters():
    assert predicates.is_titlecase('\u01c5')
    assert not predicates.is_titlecase('A')
    assert predicates.isupper('ABC')
    assert predicates.isupper('HELLO')
    assert not predicates.isupper('\u01c5')
    assert not predicates.islower('\u01c5a')


def test_istitle():
    assert predicates.istitle('Hello World')
    assert predicates.istitle('Hello, World 2Day')
    assert not predicates.istitle('Hello world')
    assert not predicates.istitle('HEllo')
    assert not predicates.istitle('123')


def test_is_cased():
    assert predicates.is_cased('a')
    assert predicates.is_cased('A')
    assert predicates.is_cased('ǅ')
    assert not predicates.is_cased('1')
    assert not predicates.is_cased(' ')
