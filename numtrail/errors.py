"""Error types raised by numtrail.

All errors derive from ``NumTrailError`` so the command line can report them
uniformly. Input errors also subclass ``ValueError``.
"""

from __future__ import annotations


class NumTrailError(Exception):
    """Base class for all numtrail errors."""


class InvalidCount(NumTrailError, ValueError):
    """The announced number of values is missing, non-numeric or out of range."""


class InvalidNumber(NumTrailError, ValueError):
    """An input value is not an integer."""


class CyclicGraphError(NumTrailError):
    """The oriented edge set contains a cycle, so -1 weights would diverge."""
