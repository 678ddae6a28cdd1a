import pytest
from hypothesis import given
from hypothesis import strategies as st

from iterkit.ziptuple import multizip


def test_single_iterable():
    it = multizip(range(2, 3))
    assert next(it) == (2,)
    with pytest.raises(StopIteration):
        next(it)


def test_multizip3():
    assert list(multizip(range(3), range(2), range(2))) == [(0, 0, 0), (1, 1, 1)]


def test_with_empty_source():
    assert list(multizip(range(3), range(2), range(2), [])) == []


def test_five_sources_with_empties():
    xs = []
    assert list(multizip(range(3), range(2), iter(xs), xs, list(xs))) == []


def test_sources_advanced_in_order():
    a = iter([1, 2, 3])
    assert list(multizip(a, [])) == []
    assert next(a) == 2


def test_no_iterables_rejected():
    with pytest.raises(TypeError):
        multizip()


def test_double_ended_zip():
    xs = [1, 2, 3, 4, 5, 6]
    ys = [1, 2, 3, 7]
    it = multizip(iter(xs), iter(ys))
    assert it.next_back() == (4, 7)
    assert it.next_back() == (3, 3)
    assert it.next_back() == (2, 2)
    assert it.next_back() == (1, 1)
    with pytest.raises(StopIteration):
        it.next_back()


def test_mixed_front_and_back():
    it = multizip([1, 2, 3, 4], [1, 2])
    assert it.next_back() == (2, 2)
    assert next(it) == (1, 1)
    with pytest.raises(StopIteration):
        next(it)


def test_fill_results_from_indices_and_inputs():
    inputs = [3, 7, 9, 6]
    results = [index * 10 + value for index, value in multizip(range(10), inputs)]
    assert results == [3, 17, 29, 36]


@given(st.lists(st.integers(0, 255)), st.lists(st.integers(0, 255)))
def test_reversed_two(a, b):
    forward = list(multizip(a, b))
    assert list(reversed(multizip(a, b))) == forward[::-1]


@given(
    st.lists(st.integers(0, 255)),
    st.lists(st.integers(0, 255)),
    st.lists(st.integers(0, 255)),
)
def test_reversed_three(a, b, c):
    forward = list(multizip(a, b, c))
    assert list(reversed(multizip(a, b, c))) == forward[::-1]
    assert len(forward) == min(len(a), len(b), len(c))