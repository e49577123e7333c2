"""Edge predicate: do two numbers differ by exactly one digit edit?

Two numbers are adjacent when their decimal string forms differ by a single
substitution (same length) or a single insertion/deletion (lengths differ by
one). Equal strings are never adjacent, so the graph has no self loops.
"""

from __future__ import annotations


def _one_substitution(s: str, t: str) -> bool:
    """Return True if equal-length ``s`` and ``t`` differ in exactly one position."""
    diffs = 0
    for a, b in zip(s, t):
        if a != b:
            diffs += 1
            if diffs > 1:
                return False
    return diffs == 1


def _one_deletion(longer: str, shorter: str) -> bool:
    """Return True if deleting one character of ``longer`` yields ``shorter``.

    Two-pointer scan that allows a single skip in ``longer``. When the scan
    consumes all of ``shorter`` without skipping, the extra character is the
    trailing one, which also counts as a single deletion.
    """
    i = j = 0
    skipped = False
    while j < len(shorter):
        if longer[i] == shorter[j]:
            i += 1
            j += 1
            continue
        if skipped:
            return False
        skipped = True
        i += 1
    return True


def is_one_char_edit(s: str, t: str) -> bool:
    """Return True if ``s`` and ``t`` differ by exactly one character edit.

    Args:
        s: First string.
        t: Second string.

    Returns:
        True for a single substitution, insertion or deletion; False otherwise,
        including when the strings are equal.
    """
    if len(s) == len(t):
        return _one_substitution(s, t)
    if len(s) == len(t) + 1:
        return _one_deletion(s, t)
    if len(t) == len(s) + 1:
        return _one_deletion(t, s)
    return False


def is_one_digit_edit(a: int, b: int) -> bool:
    """Return True if the decimal forms of ``a`` and ``b`` are one digit edit apart.

    Negative values are compared on their full string form, sign included.

    Examples:
        >>> is_one_digit_edit(1, 10)
        True
        >>> is_one_digit_edit(1, 100)
        False
        >>> is_one_digit_edit(12, 13)
        True
    """
    return is_one_char_edit(str(a), str(b))
