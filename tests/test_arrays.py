import pytest

from cdrills.arrays import (
    add_matrices,
    find_triplets,
    is_sparse,
    rotate_left,
    swap_adjacent,
)

SEVEN = [1, 2, 3, 4, 5, 6, 7]


def test_rotate_moves_front_elements_to_back():
    rotated = rotate_left(SEVEN, 2)
    assert rotated[0] == SEVEN[2]
    assert rotated[-2:] == SEVEN[:2]
    assert sorted(rotated) == SEVEN


def test_rotate_by_length_is_identity():
    assert rotate_left(SEVEN, len(SEVEN)) == SEVEN


def test_rotate_round_trip():
    d = 3
    assert rotate_left(rotate_left(SEVEN, d), len(SEVEN) - d) == SEVEN


def test_rotate_does_not_mutate_input():
    data = list(SEVEN)
    rotate_left(data, 2)
    assert data == SEVEN


def test_rotate_empty_and_negative():
    assert rotate_left([], 5) == []
    with pytest.raises(ValueError):
        rotate_left(SEVEN, -1)


def test_add_matrices_pinned():
    assert add_matrices([[1, 2], [3, 4]], [[10, 20], [30, 40]]) == [[11, 22], [33, 44]]


def test_add_matrices_zero_and_commutative():
    a = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    b = [[9, 8, 7], [6, 5, 4], [3, 2, 1]]
    zero = [[0] * 3 for _ in range(3)]
    assert add_matrices(a, zero) == a
    assert add_matrices(a, b) == add_matrices(b, a)


def test_add_matrices_shape_mismatch():
    with pytest.raises(ValueError):
        add_matrices([[1, 2]], [[1, 2, 3]])
    with pytest.raises(ValueError):
        add_matrices([[1]], [[1], [2]])


def test_is_sparse_extremes():
    assert is_sparse([[0, 0, 0], [0, 0, 0], [0, 0, 0]]) is True
    assert is_sparse([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) is False


def test_is_sparse_threshold_on_3x3():
    assert is_sparse([[0, 0, 0], [0, 5, 6], [7, 8, 9]]) is True
    assert is_sparse([[0, 0, 0], [4, 5, 6], [7, 8, 9]]) is False


def test_swap_adjacent_pinned_and_round_trip():
    assert swap_adjacent([1, 2, 3, 4]) == [2, 1, 4, 3]
    data = [5, 9, 1, 7, 3, 8]
    assert swap_adjacent(swap_adjacent(data)) == data


def test_swap_adjacent_odd_length():
    with pytest.raises(ValueError):
        swap_adjacent([1, 2, 3])


def test_find_triplets_sum_invariant():
    data = [1, 4, 2, 3, 5, 0]
    found = find_triplets(data, 6)
    assert found
    assert all(sum(t) == 6 for t in found)
    assert len(set(found)) == len(found)


def test_find_triplets_single_and_none():
    assert find_triplets([1, 2, 3], 6) == [(1, 2, 3)]
    assert find_triplets([1, 2, 3], 100) == []
    assert find_triplets([1, 2], 3) == []