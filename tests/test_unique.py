import pytest
from hypothesis import given
from hypothesis import strategies as st

from iterkit.unique import UniqueBy, unique, unique_by

WORDS = ["aaa", "bbbbb", "aa", "ccc", "bbbb", "aaaaa", "cccc"]


def prefix(word):
    return word[:2]


def drain_back(it):
    out = []
    while True:
        try:
            out.append(it.next_back())
        except StopIteration:
            return out


def test_unique_by_forward():
    assert list(unique_by(WORDS, prefix)) == ["aaa", "bbbbb", "ccc"]


def test_unique_by_reversed_input_read_backwards():
    it = unique_by(list(reversed(WORDS)), prefix)
    assert drain_back(it) == ["aaa", "bbbbb", "ccc"]


def test_unique_by_backwards():
    assert drain_back(unique_by(WORDS, prefix)) == ["cccc", "aaaaa", "bbbb"]
    assert list(reversed(unique_by(WORDS, prefix))) == ["cccc", "aaaaa", "bbbb"]


def test_unique():
    xs = [0, 1, 2, 3, 2, 1, 3]
    assert list(unique(xs)) == [0, 1, 2, 3]
    assert drain_back(unique(list(reversed(xs)))) == [0, 1, 2, 3]
    assert drain_back(unique(xs)) == [3, 1, 2, 0]


def test_unique_two_items():
    xs = [0, 1]
    assert list(unique(xs)) == [0, 1]
    assert drain_back(unique(list(reversed(xs)))) == [0, 1]
    assert drain_back(unique(xs)) == [1, 0]


def test_mixed_front_and_back_share_seen_keys():
    it = unique([1, 2, 1, 3])
    assert next(it) == 1
    assert it.next_back() == 3
    assert next(it) == 2
    with pytest.raises(StopIteration):
        it.next_back()
    with pytest.raises(StopIteration):
        next(it)


def test_count_after_partial_consumption():
    it = unique([4, 4, 5, 6, 5, 4, 7])
    assert next(it) == 4
    assert it.count() == 3


def test_unhashable_key_raises_after_hashable_items():
    it = unique([1, [2]])
    assert next(it) == 1
    with pytest.raises(TypeError):
        next(it)


def test_unhashable_items_with_hashable_key():
    assert list(unique_by([[1], [2], [1]], tuple)) == [[1], [2]]


def test_works_on_one_shot_iterator():
    it = UniqueBy(iter([3, 3, 1, 3, 1]))
    assert iter(it) is it
    assert list(it) == [3, 1]


@given(a=st.lists(st.integers(-128, 127), max_size=40), take_first=st.integers(0, 255))
def test_count_unique(a, take_first):
    answer = len(set(a))
    it = unique(a)
    first_count = 0
    for _ in range(take_first):
        try:
            next(it)
        except StopIteration:
            break
        first_count += 1
    rest_count = it.count()
    assert first_count + rest_count == answer


@given(a=st.lists(st.integers(-128, 127), max_size=40))
def test_unique_yields_each_distinct_item_once(a):
    result = list(unique(a))
    assert len(result) == len(set(result))
    assert set(result) == set(a)