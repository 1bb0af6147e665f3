"""Typer-based CLI entrypoint for artifact_writer."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Any, Callable

import typer
from rich.console import Console
from rich.panel import Panel

from .config import WriterConfig, infer_format_kind, load_config
from .files import create_out_dir, save_file
from .formatters import FormatKind

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()


def run_step(name: str, fn: Callable[[], Any], hint: str) -> Any:
    try:
        return fn()
    except Exception as exc:
        console.print(Panel(f"[bold red]{name} failed[/bold red]\n\n{exc}\n\n[dim]{hint}[/dim]", title="Write Error"))
        raise typer.Exit(code=1)


def resolve_format_kind(cfg: WriterConfig, file_name: str) -> FormatKind:
    """Use the configured kind when one was given, else infer it from the file name."""

    if "format_kind" in cfg.options.model_fields_set:
        return cfg.options.format_kind
    return infer_format_kind(file_name)


def read_contents(input_path: Path | None) -> str:
    if input_path is None or str(input_path) == "-":
        return sys.stdin.read()
    return input_path.read_text(encoding="utf-8")


@app.command("mkdir")
def mkdir_cmd(out_dir: str = typer.Argument(..., help="Directory to create if missing.")) -> None:
    run_step("mkdir", lambda: create_out_dir(out_dir), "Check that the parent path is writable.")
    console.print(f"[bold green]Directory ready[/bold green] {out_dir}")


@app.command("write")
def write_cmd(
    file_name: str = typer.Argument(..., help="Name of the file to write inside the output directory."),
    input_path: Path | None = typer.Option(None, "--input", help="File to read contents from; '-' or omitted reads stdin."),
    out_dir: str | None = typer.Option(None, "--out-dir"),
    kind: FormatKind | None = typer.Option(None, "--kind", case_sensitive=False),
    print_width: int | None = typer.Option(None, "--print-width"),
    config: Path = typer.Option(Path("config.yaml"), "--config"),
) -> None:
    cfg = run_step(
        "config",
        lambda: load_config(config, {
            "out_dir": out_dir,
            "options.format_kind": kind,
            "options.print_width": print_width,
        }),
        "Check the YAML config and the option values.",
    )
    format_kind = resolve_format_kind(cfg, file_name)
    contents = run_step("read", lambda: read_contents(input_path), "Check the --input path.")

    run_step("mkdir", lambda: create_out_dir(cfg.out_dir), "Check that the parent path is writable.")
    output_path = run_step(
        "write",
        lambda: asyncio.run(save_file(cfg.out_dir, file_name, contents, format_kind, cfg.options.print_width)),
        f"Check that the contents are valid {format_kind.value} and that {cfg.out_dir} is a writable directory.",
    )
    console.print(f"[bold green]Wrote[/bold green] {output_path}")


if __name__ == "__main__":
    app()
