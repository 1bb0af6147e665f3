"""Formatting rule-sets applied to artifacts before they are written."""

from __future__ import annotations

import asyncio
from enum import Enum
from typing import Callable

import black

from . import json_printer


class FormatKind(str, Enum):
    JSON = "json"
    SOURCE = "source"


class FormattingError(ValueError):
    """Raised when contents are not valid for the selected format kind."""

    def __init__(self, format_kind: FormatKind, reason: str) -> None:
        super().__init__(f"Cannot format contents as {format_kind.value}: {reason}")
        self.format_kind = format_kind
        self.reason = reason


def format_json(contents: str, print_width: int = 80) -> str:
    try:
        value = json_printer.parse(contents)
    except ValueError as exc:
        raise FormattingError(FormatKind.JSON, str(exc)) from exc
    return json_printer.render(value, print_width=print_width)


def format_source(contents: str, print_width: int = 80) -> str:
    """Format Python source with black at the given line length."""

    try:
        return black.format_str(contents, mode=black.Mode(line_length=print_width))
    except black.InvalidInput as exc:
        raise FormattingError(FormatKind.SOURCE, str(exc)) from exc


_RULESETS: dict[FormatKind, Callable[[str, int], str]] = {
    FormatKind.JSON: format_json,
    FormatKind.SOURCE: format_source,
}


async def format_text(contents: str, format_kind: FormatKind, print_width: int = 80) -> str:
    """Run the rule-set for ``format_kind`` in a worker thread and return the text."""

    ruleset = _RULESETS[format_kind]
    return await asyncio.to_thread(ruleset, contents, print_width)
