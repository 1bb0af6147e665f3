"""Width-aware JSON pretty printer used for structured-data artifacts."""

from __future__ import annotations

import json
from typing import Any


class JsonObject(list):
    """Ordered ``(key, value)`` pairs of a parsed object, duplicates kept."""


class JsonNumber(str):
    """Number literal exactly as spelled in the source text."""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse(text: str) -> Any:
    """Parse JSON text into printer nodes.

    Objects become :class:`JsonObject`, arrays plain lists, numbers
    :class:`JsonNumber`. ``NaN`` and ``Infinity`` are rejected, as is input
    nested deeper than the parser can follow.
    """

    try:
        return json.loads(
            text,
            object_pairs_hook=JsonObject,
            parse_int=JsonNumber,
            parse_float=JsonNumber,
            parse_constant=_reject_constant,
        )
    except RecursionError as exc:
        raise ValueError("JSON is nested too deeply to parse") from exc


def _scalar(value: Any) -> str:
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, JsonNumber):
        return str(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    # plain Python numbers, for callers rendering values they built themselves
    if isinstance(value, (int, float)):
        return json.dumps(value)
    raise TypeError(f"Cannot render value of type {type(value).__name__}")


def _is_number(value: Any) -> bool:
    if isinstance(value, JsonNumber):
        return True
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _members(value: JsonObject | list) -> list[tuple[str, Any]]:
    if isinstance(value, JsonObject):
        return [(f"{_scalar(key)}: ", item) for key, item in value]
    return [("", item) for item in value]


def _is_number_list(value: list) -> bool:
    """Arrays of two or more numbers fill lines instead of going one per line."""

    return not isinstance(value, JsonObject) and len(value) > 1 and all(_is_number(item) for item in value)


def _is_record_list(value: list) -> bool:
    """Arrays of two or more same-kind containers with several members always break."""

    if isinstance(value, JsonObject) or len(value) < 2:
        return False
    kind = type(value[0])
    return all(isinstance(item, list) and type(item) is kind and len(item) > 1 for item in value)


def _measure(root: Any) -> dict[int, tuple[int, bool]]:
    """Flat width and forced-break flag of every container, computed bottom-up."""

    sizes: dict[int, tuple[int, bool]] = {}
    stack: list[tuple[Any, bool]] = [(root, False)]
    while stack:
        value, children_done = stack.pop()
        if not isinstance(value, list):
            continue
        members = _members(value)
        if not children_done:
            stack.append((value, True))
            stack.extend((item, False) for _, item in members if isinstance(item, list))
            continue
        if not members:
            sizes[id(value)] = (2, False)
            continue

        width = 4 if isinstance(value, JsonObject) else 2
        width += 2 * (len(members) - 1)
        forced = _is_record_list(value)
        for prefix, item in members:
            if isinstance(item, list):
                item_width, item_forced = sizes[id(item)]
                forced = forced or item_forced
            else:
                item_width = len(_scalar(item))
            width += len(prefix) + item_width
        sizes[id(value)] = (width, forced)
    return sizes


def _fill(numbers: list, pad: str, print_width: int) -> str:
    tokens = [_scalar(item) + ("," if position < len(numbers) - 1 else "") for position, item in enumerate(numbers)]
    lines = [pad + tokens[0]]
    column = len(lines[0])
    for token in tokens[1:]:
        if column + 1 + len(token) <= print_width:
            lines[-1] += " " + token
            column += 1 + len(token)
        else:
            lines.append(pad + token)
            column = len(pad) + len(token)
    return "\n".join(lines)


def _expand(value: list, level: int, flat: bool, indent: int, print_width: int) -> list[Any]:
    is_object = isinstance(value, JsonObject)
    opener, closer = ("{", "}") if is_object else ("[", "]")
    members = _members(value)

    if flat:
        space = " " if is_object else ""
        parts: list[Any] = [opener + space]
        for position, (prefix, item) in enumerate(members):
            parts.append((", " if position else "") + prefix)
            parts.append((item, level + 1, 0, True))
        parts.append(space + closer)
        return parts

    pad = " " * (indent * (level + 1))
    tail = "\n" + " " * (indent * level) + closer
    if _is_number_list(value):
        return [opener + "\n" + _fill(value, pad, print_width) + tail]

    parts = [opener]
    for position, (prefix, item) in enumerate(members):
        is_last = position == len(members) - 1
        parts.append(f"\n{pad}{prefix}")
        parts.append((item, level + 1, 0 if is_last else 1, False))
        if not is_last:
            parts.append(",")
    parts.append(tail)
    return parts


def _layout(root: Any, print_width: int, indent: int) -> str:
    sizes = _measure(root)
    out: list[str] = []
    column = 0
    # work items are text to emit or (node, level, trailing, flat) tuples
    stack: list[Any] = [(root, 0, 0, False)]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            out.append(item)
            newline = item.rfind("\n")
            column = column + len(item) if newline < 0 else len(item) - newline - 1
            continue

        value, level, trailing, flat = item
        if not isinstance(value, list):
            stack.append(_scalar(value))
            continue
        if not value:
            stack.append("{}" if isinstance(value, JsonObject) else "[]")
            continue

        width, forced = sizes[id(value)]
        flat = flat or (not forced and column + width + trailing <= print_width)
        stack.extend(reversed(_expand(value, level, flat, indent, print_width)))
    return "".join(out)


def render(value: Any, print_width: int = 80, indent: int = 2) -> str:
    """Lay out parsed JSON, keeping each group on one line when it fits.

    A group that does not fit in ``print_width`` (counting the trailing comma
    that follows it) is broken with one member per line; its members are then
    laid out independently. Broken number arrays fill each line instead, and
    arrays of multi-member objects or arrays always break, along with every
    group that contains them. The result ends with a single newline.
    """

    if print_width < 1:
        raise ValueError("print_width must be >= 1")
    return _layout(value, print_width=print_width, indent=indent) + "\n"


def pretty_print(text: str, print_width: int = 80) -> str:
    return render(parse(text), print_width=print_width)
