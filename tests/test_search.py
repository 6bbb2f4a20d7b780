import itertools

import pytest

from pystr import search
from pystr.common import PyTypeError, PyValueError

TEXT = 'abcabcab'
BOUNDS = [None, -12, -8, -3, -1, 0, 2, 3, 8, 9, 12]
NEEDLES = ['', 'a', 'ab', 'bca', 'cab', 'x', 'abcabcabc']


# find/rfind


def test_find_matches_str():
    for sub, start, end in itertools.product(NEEDLES, BOUNDS, BOUNDS):
        assert search.find(TEXT, sub, start, end) == TEXT.find(sub, start, end), \
            (sub, start, end)
        assert search.rfind(TEXT, sub, start, end) == TEXT.rfind(sub, start, end), \
            (sub, start, end)


def test_find_empty():
    """ The empty string is found everywhere, including just past the end. """
    assert search.find('abc', '') == 0
    assert search.find('abc', '', 3) == 3
    assert search.find('abc', '', -2) == 1
    assert search.find('abc', '', -3) == 0
    assert search.find('abc', '', -10) == 0
    assert search.find('abc', '', 4) == -1

    assert search.rfind('abc', '') == 3
    assert search.rfind('abc', '', None, 1) == 1
    assert search.rfind('abc', '', None, -10) == 0
    assert search.rfind('abc', '', 4) == -1


def test_find_unique_agrees():
    for text, sub in [('hello world', 'wor'), ('abc', 'c'), ('x', 'x')]:
        assert search.find(text, sub) == search.rfind(text, sub)


def test_index():
    assert search.index('hello', 'l') == 2
    assert search.rindex('hello', 'l') == 3
    assert search.index('hello', '', 5) == 5

    with pytest.raises(PyValueError, match='substring not found'):
        search.index('hello', 'z')
    with pytest.raises(ValueError, match='substring not found'):
        search.rindex('hello', 'h', 1)


# count


def test_count_matches_str():
    for sub, start, end in itertools.product(NEEDLES[1:], BOUNDS, BOUNDS):
        assert search.count(TEXT, sub, start, end) == TEXT.count(sub, start, end), \
            (sub, start, end)


def test_count_non_overlapping():
    assert search.count('aaaa', 'aa') == 2
    assert search.count('aaa', 'aa') == 1


def test_count_empty():
    """ Every gap between characters counts, plus both ends. """
    assert search.count('', '') == 1
    assert search.count('abc', '') == 4
    assert search.count('abc', '', 1) == 3
    assert search.count('abc', '', -1) == 2
    for start, end in itertools.product(BOUNDS, BOUNDS):
        assert search.count(TEXT, '', start, end) == len(TEXT[start:end]) + 1


def test_contains():
    assert search.contains('hello', 'ell')
    assert search.contains('hello', '')
    assert search.contains('', '')
    assert not search.contains('hello', 'elo')


# startswith/endswith


def test_startswith_matches_str():
    affixes = ['', 'a', 'ab', 'abc', 'b', 'cab', ('x', 'ca'), ('b', ''), ()]
    for affix, start, end in itertools.product(affixes, BOUNDS, BOUNDS):
        assert search.startswith(TEXT, affix, start, end) == TEXT.startswith(affix, start, end), \
            (affix, start, end)
        assert search.endswith(TEXT, affix, start, end) == TEXT.endswith(affix, start, end), \
            (affix, start, end)


def test_startswith_past_end():
    assert search.startswith('abc', '', 3)
    assert not search.startswith('abc', '', 4)
    assert not search.endswith('abc', '', 2, 1)


def test_startswith_tuple():
    assert search.startswith('-3', ('+', '-'))
    assert search.endswith('file.yaml', ('.txt', '.yaml'))
    assert not search.endswith('file.yaml', ('.txt', '.yml'))


def test_startswith_bad_type():
    with pytest.raises(PyTypeError):
        search.startswith('abc', ['a'])
    with pytest.raises(TypeError):
        search.endswith('abc', ('a', 1))


# partition


def test_partition():
    assert search.partition('key=value', '=') == ['key', '=', 'value']
    assert search.partition('noequals', '=') == ['noequals', '', '']
    assert search.partition('a=b=c', '=') == ['a', '=', 'b=c']
    assert search.partition('a==b', '==') == ['a', '==', 'b']


def test_rpartition():
    assert search.rpartition('a=b=c', '=') == ['a=b', '=', 'c']
    assert search.rpartition('noequals', '=') == ['', '', 'noequals']


@pytest.mark.parametrize('func', [search.partition, search.rpartition])
def test_partition_empty_separator(func):
    with pytest.raises(PyValueError, match='empty separator'):
        func('abc', '')


# split


def test_split_whitespace():
    assert search.split('  a  b  ') == ['a', 'b']
    assert search.split('') == []
    assert search.split(' \t\n ') == []
    assert search.split('a\tb\nc') == ['a', 'b', 'c']


def test_split_explicit_keeps_empty():
    assert search.split('1,2,,3', ',') == ['1', '2', '', '3']
    assert search.split(',a,', ',') == ['', 'a', '']
    assert search.split('', ',') == ['']
    assert search.split('  a  ', ' ') == ['', '', 'a', '', '']


SPLIT_TEXTS = ['', 'a', '  a  b  c  ', 'a\t\tb\n', '1,2,,3', ',a,', 'aaa', 'a,,b,,']


def test_split_matches_str():
    for text, sep, maxsplit in itertools.product(
            SPLIT_TEXTS, [None, ',', ',,', 'aa', ' '], [-1, 0, 1, 2]):
        assert search.split(text, sep, maxsplit) == text.split(sep, maxsplit), \
            (text, sep, maxsplit)
        assert search.rsplit(text, sep, maxsplit) == text.rsplit(sep, maxsplit), \
            (text, sep, maxsplit)


def test_split_maxsplit_remainder():
    assert search.split('  a  b  ', None, 1) == ['a', 'b  ']
    assert search.rsplit('  a  b  ', None, 1) == ['  a', 'b']
    assert search.rsplit('a,b,c', ',', 1) == ['a,b', 'c']


@pytest.mark.parametrize('func', [search.split, search.rsplit])
def test_split_empty_separator(func):
    with pytest.raises(PyValueError, match='empty separator'):
        func('abc', '')


def test_split_join_round_trip():
    for text, sep in [('1,2,,3', ','), (',a,', ','), ('a--b----c', '--'), ('', ';')]:
        assert sep.join(search.split(text, sep)) == text
        assert sep.join(search.rsplit(text, sep)) == text


# replace


def test_replace():
    assert search.replace('hello world', 'o', '0') == 'hell0 w0rld'
    assert search.replace('hello world', 'o', '0', 1) == 'hell0 world'
    assert search.replace('hello', 'z', '0') == 'hello'
    assert search.replace('aaaa', 'aa', 'b') == 'bb'


def test_replace_tail_once():
    # Limit reached mid-scan, and needle exhausted before the limit.
    assert search.replace('a.b.c', '.', '-', 1) == 'a-b.c'
    assert search.replace('a.b.c', '.', '-', 5) == 'a-b-c'
    assert search.replace('a.b.c.', '.', '-', 3) == 'a-b-c-'


def test_replace_empty_old():
    assert search.replace('abc', '', '-') == '-a-b-c-'
    assert search.replace('', '', '-') == '-'
    assert search.replace('abc', '', '-', 2) == '-a-bc'
    assert search.replace('abc', '', '-', 0) == 'abc'


def test_replace_matches_str():
    for old, new, count in itertools.product(['', 'a', 'ab', 'x'], ['', '-', 'ab'], [-1, 0, 1, 2, 9]):
        assert search.replace(TEXT, old, new, count) == TEXT.replace(old, new, count), \
            (old, new, count)


def test_replace_count_preserved():
    for text, old in [('abcabcab', 'ab'), ('a.b.c', '.'), ('xxxx', 'xx')]:
        before = search.count(text, old)
        replaced = search.replace(text, old, '\0')
        assert search.count(replaced, '\0') == before
