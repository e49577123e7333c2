import pytest

from numtrail.graph.edit import is_one_char_edit, is_one_digit_edit


def _reference(s: str, t: str) -> bool:
    """Brute-force one-edit check: compare against every single deletion."""
    if len(s) == len(t):
        return sum(a != b for a, b in zip(s, t)) == 1
    longer, shorter = (s, t) if len(s) > len(t) else (t, s)
    if len(longer) != len(shorter) + 1:
        return False
    return any(longer[:k] + longer[k + 1 :] == shorter for k in range(len(longer)))


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (1, 2, True),
        (1, 3, True),
        (12, 13, True),
        (12, 21, False),
        (123, 123, False),
        (1, 10, True),
        (10, 1, True),
        (10, 100, True),
        (1, 100, False),
        (12, 102, True),
        (12, 120, True),
        (12, 312, True),
        (12, 321, False),
        (12, 211, False),
        (123, 1234, True),
        (10, 1000, False),
        (0, 10, True),
        (5, 55, True),
        (-1, -12, True),
        (-1, 1, True),
        (-12, 12, True),
    ],
)
def test_is_one_digit_edit_cases(a, b, expected):
    assert is_one_digit_edit(a, b) is expected


def test_trailing_insertion_counts_as_single_skip():
    assert is_one_char_edit("123", "1234")
    assert is_one_char_edit("1234", "123")
    assert is_one_char_edit("13", "123")


def test_only_one_skip_allowed():
    assert not is_one_char_edit("135", "1234")
    assert not is_one_char_edit("1", "123")
    assert not is_one_char_edit("12", "3124")


def test_no_self_loops():
    for value in (0, 7, 42, 1000, -5):
        assert not is_one_digit_edit(value, value)


def test_predicate_matches_reference_and_is_symmetric():
    values = list(range(0, 120)) + [1000, 1001, 1010, 1100, 10000]
    for a in values:
        for b in values:
            expected = _reference(str(a), str(b))
            assert is_one_digit_edit(a, b) is expected, (a, b)
            assert is_one_digit_edit(b, a) is expected, (b, a)
