from cdrills.patterns import (
    alphabet_pyramid,
    cube_table,
    multiplication_table,
    right_aligned_pyramid,
    right_angle,
    star_pyramid,
)


def _leading_spaces(line):
    return len(line) - len(line.lstrip(" "))


def test_star_pyramid_single_row():
    assert star_pyramid(1) == ["* "]


def test_star_pyramid_shape():
    lines = star_pyramid(5)
    assert len(lines) == 5
    stars = [line.count("*") for line in lines]
    assert all(b - a == 2 for a, b in zip(stars, stars[1:]))
    indents = [_leading_spaces(line) for line in lines]
    assert indents[-1] == 0
    assert all(a - b == 2 for a, b in zip(indents, indents[1:]))


def test_star_pyramid_empty():
    assert star_pyramid(0) == []


def test_alphabet_pyramid_rows_are_palindromes():
    lines = alphabet_pyramid(5)
    assert len(lines) == 5
    for line in lines:
        letters = line.split()
        assert letters == letters[::-1]
    assert lines[-1].split()[4] == "E"
    assert lines[0].strip() == "A"


def test_alphabet_pyramid_last_row_unindented():
    assert _leading_spaces(alphabet_pyramid(4)[-1]) == 0


def test_alphabet_pyramid_limits():
    assert alphabet_pyramid(0) == []
    assert alphabet_pyramid(27) == []
    assert alphabet_pyramid(26)[-1].split()[25] == "Z"


def test_right_aligned_pyramid_shape():
    lines = right_aligned_pyramid(4)
    assert [line.count("*") for line in lines] == [1, 2, 3, 4]
    indents = [_leading_spaces(line) for line in lines]
    assert all(a - b == 1 for a, b in zip(indents, indents[1:]))


def test_right_angle_lengths():
    assert [len(line) for line in right_angle(4)] == [1, 2, 3, 4]
    assert set("".join(right_angle(4))) == {"*"}


def test_cube_table():
    lines = cube_table(3)
    assert len(lines) == 3
    assert lines[1] == "Number is : 2 and cube of the 2 is :8 "


def test_multiplication_table():
    lines = multiplication_table(7)
    assert len(lines) == 10
    assert lines[0] == "7 X 1 = 7 "
    assert all(line.startswith("7 X ") for line in lines)