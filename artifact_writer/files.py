"""Output directory and formatted artifact helpers."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import Awaitable, Callable

from .formatters import FormatKind, format_text

CURRENT_DIR = "./"
DEFAULT_PRINT_WIDTH = 80

Formatter = Callable[[str, FormatKind, int], Awaitable[str]]


def create_out_dir(out_dir: str | os.PathLike[str]) -> None:
    """Create ``out_dir`` and any missing parents, unless it is ``"./"``."""

    if out_dir == CURRENT_DIR:
        return
    path = Path(out_dir)
    if not path.exists():
        path.mkdir(parents=True, exist_ok=True)


def _write_text(path: Path, text: str) -> None:
    # newline="" keeps the formatter's line endings byte for byte
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(text)


async def save_file(
    out_dir: str | os.PathLike[str],
    file_name: str,
    contents: str,
    format_kind: FormatKind = FormatKind.JSON,
    print_width: int = DEFAULT_PRINT_WIDTH,
    *,
    formatter: Formatter = format_text,
) -> Path:
    """Format ``contents`` and write them to ``out_dir / file_name``.

    Formatting runs first; if it raises, nothing is written. An existing file
    at the target is truncated and replaced. Errors from the formatter and
    from the filesystem propagate unchanged. Returns the written path.
    """

    output_path = Path(out_dir) / file_name
    formatted = await formatter(contents, format_kind, print_width)
    await asyncio.to_thread(_write_text, output_path, formatted)
    return output_path
