"""Input readers and report renderers.

Readers turn interactive prompts, whitespace-separated text, or a YAML
document into a list of integers, raising ``InvalidCount`` or
``InvalidNumber`` on malformed input. Renderers turn a ``TrailReport`` into
the plain-text report or a JSON document.
"""

from __future__ import annotations

import json
import re
import sys
from collections import deque
from pathlib import Path
from typing import Any, Callable, Deque, List, Optional

import yaml

from numtrail.config import DEFAULT_CONFIG, TrailConfig
from numtrail.errors import InvalidCount, InvalidNumber
from numtrail.logging import get_logger
from numtrail.model.trail import TrailReport

logger = get_logger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")

#: Plain decimal integer: optional sign, ASCII digits only.
INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)


def parse_count(token: str, config: TrailConfig = DEFAULT_CONFIG) -> int:
    """Parse and validate the announced number of values.

    Raises:
        InvalidCount: If ``token`` is not an integer or is out of range.
    """
    token = token.strip()
    if not INTEGER_RE.fullmatch(token):
        raise InvalidCount(f"Count must be an integer, got {token!r}")
    count = int(token)
    return config.check_count(count)


def parse_number(token: str, position: int) -> int:
    """Parse one value.

    Raises:
        InvalidNumber: If ``token`` is not an integer.
    """
    token = token.strip()
    if not INTEGER_RE.fullmatch(token):
        raise InvalidNumber(f"Value {position + 1} must be an integer, got {token!r}")
    return int(token)


def _next_token(
    input_fn: Callable[[str], str], prompt: str, pending: Deque[str]
) -> str:
    """Pop the next token, prompting for another line only when none are pending."""
    while not pending:
        pending.extend(input_fn(prompt).split())
    return pending.popleft()


def read_interactive(
    input_fn: Optional[Callable[[str], str]] = None,
    config: TrailConfig = DEFAULT_CONFIG,
) -> List[int]:
    """Prompt for a count and then for that many values.

    Lines are split into tokens, so several values may be entered on one
    line; a prompt is shown only when no typed tokens are left over. Blank
    lines are skipped. Tokens remaining after the last value are ignored.

    Args:
        input_fn: Callable that shows a prompt and returns one line
            (defaults to the builtin ``input``).
        config: Supplies the prompt text and count limits.

    Returns:
        The values in entry order.
    """
    if input_fn is None:
        input_fn = input
    pending: Deque[str] = deque()
    try:
        count = parse_count(_next_token(input_fn, config.prompt, pending), config)
    except EOFError:
        raise InvalidCount("Input ended before a count was entered") from None

    values: List[int] = []
    for position in range(count):
        try:
            token = _next_token(input_fn, config.prompt, pending)
        except EOFError:
            raise InvalidNumber(
                f"Input ended after {position} of {count} values"
            ) from None
        values.append(parse_number(token, position))
    if pending:
        logger.warning(f"Ignoring {len(pending)} value(s) beyond count {count}")
    return values


def read_text(text: str, config: TrailConfig = DEFAULT_CONFIG) -> List[int]:
    """Read ``<count> <v1> ... <vn>`` from whitespace-separated text.

    Tokens beyond the announced count are ignored with a warning.
    """
    tokens = text.split()
    if not tokens:
        raise InvalidCount("Input is empty; expected a count")
    count = parse_count(tokens[0], config)
    body = tokens[1:]
    if len(body) < count:
        raise InvalidCount(f"Expected {count} values, got {len(body)}")
    if len(body) > count:
        logger.warning(f"Ignoring {len(body) - count} value(s) beyond count {count}")
    return [
        parse_number(token, position) for position, token in enumerate(body[:count])
    ]


def read_yaml(text: str, config: TrailConfig = DEFAULT_CONFIG) -> List[int]:
    """Read values from a YAML mapping with a ``numbers`` list.

    Example:
        numbers: [1, 10, 100]
    """
    data = yaml.safe_load(text)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidCount(
            "The provided YAML must map to a dictionary with a 'numbers' list"
        )
    numbers: Any = data.get("numbers")
    if not isinstance(numbers, list):
        raise InvalidCount("'numbers' must be a list of integers")
    config.check_count(len(numbers))

    values: List[int] = []
    for position, value in enumerate(numbers):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidNumber(
                f"Value {position + 1} must be an integer, got {value!r}"
            )
        values.append(value)
    return values


def read_input(
    path: Path,
    config: TrailConfig = DEFAULT_CONFIG,
    stdin: Optional[Any] = None,
) -> List[int]:
    """Read values from ``path``; ``-`` reads text from ``stdin``.

    Files ending in ``.yaml``/``.yml`` are parsed with ``read_yaml``; anything
    else with ``read_text``.
    """
    if str(path) == "-":
        if stdin is None:
            stdin = sys.stdin
        logger.debug("Reading values from stdin")
        return read_text(stdin.read(), config)

    logger.debug(f"Reading values from: {path}")
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in YAML_SUFFIXES:
        return read_yaml(text, config)
    return read_text(text, config)


def render_text(report: TrailReport, show_edges: bool = True) -> str:
    """Render the plain-text report, ending with a newline.

    Layout: a blank line, one ``<value>: <higher neighbors>`` line per vertex,
    a blank line, the maximum trail length, and one line per trail.
    """
    lines: List[str] = [""]
    if show_edges:
        for vertex, value in enumerate(report.numbers):
            linked = "".join(f" {n}" for n in report.higher_neighbor_values(vertex))
            lines.append(f"{value}:{linked}")
    lines.append("")
    lines.append(f"Maximum trail length: {report.max_length}")
    lines.append("Longest trail(s):")
    lines.extend(trail.render() for trail in report.trails)
    return "\n".join(lines) + "\n"


def render_json(report: TrailReport) -> str:
    """Render the report as an indented JSON document."""
    return json.dumps(report.to_dict(), indent=2)
