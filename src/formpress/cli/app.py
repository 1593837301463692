#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

import importlib.metadata
from pathlib import Path
from typing import Any, Callable

import typer
from rich.traceback import install as install_rich_traceback

from ..archive import zip_documents
from ..config import init_user_config, load_app_config, user_config_needs_init
from ..jobs import build_document, load_job
from .ui import _warn, console, console_err

app = typer.Typer(add_completion=False, help="formpress: paginated form PDFs.")

_RENDER_HELP = (
    "Render a JSON or TOML job file to PDF.\n\n"
    "Examples:\n"
    "  formpress render invoice.json -o invoice.pdf\n"
    "  formpress render report.toml --watermark DRAFT\n"
)


def _get_version() -> str:
    try:
        return importlib.metadata.version("formpress")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0"


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"formpress {_get_version()}")
        raise typer.Exit()


def _paper_callback(value: str | None) -> str | None:
    if value is None:
        return None
    normalized = value.strip().upper()
    if normalized not in {"A4", "LETTER"}:
        raise typer.BadParameter("paper must be A4 or LETTER")
    return normalized


def _ctx_value(ctx: typer.Context, key: str) -> Any:
    if ctx.obj is None:
        return None
    return ctx.obj.get(key)


def _run_cli(func: Callable[[], Any], *, debug: bool) -> None:
    if debug:
        install_rich_traceback(show_locals=True)
    try:
        result = func()
    except (OSError, RuntimeError, ValueError, TypeError, LookupError) as exc:
        if debug:
            raise
        console_err.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=2)
    if isinstance(result, int) and result != 0:
        raise typer.Exit(code=result)


@app.callback()
def cli(
    ctx: typer.Context,
    config: str | None = typer.Option(
        None,
        "--config",
        help="Use this TOML config file.",
        rich_help_panel="Global",
    ),
    paper: str | None = typer.Option(
        None,
        "--paper",
        help="Paper size override (A4/Letter).",
        callback=_paper_callback,
        rich_help_panel="Global",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Show full tracebacks on errors.",
        rich_help_panel="Debug",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Hide non-error output.",
        rich_help_panel="Global",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
        rich_help_panel="Info",
    ),
) -> None:
    _ = version
    if config and paper:
        raise typer.BadParameter("use either --config or --paper, not both")
    ctx.ensure_object(dict)
    ctx.obj.update({"config": config, "paper": paper, "debug": debug, "quiet": quiet})


@app.command(help=_RENDER_HELP)
def render(
    ctx: typer.Context,
    job: Path = typer.Argument(..., help="Job file (.json or .toml)."),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output PDF path (defaults to <job>.pdf).",
        rich_help_panel="Outputs",
    ),
    watermark: str | None = typer.Option(
        None,
        "--watermark",
        help="Stamp this text on every page.",
        rich_help_panel="Outputs",
    ),
) -> None:
    quiet = bool(_ctx_value(ctx, "quiet"))

    def _run() -> None:
        config = load_app_config(_ctx_value(ctx, "config"), paper_size=_ctx_value(ctx, "paper"))
        data = load_job(job)
        if watermark:
            data["watermark"] = watermark
        if not data.get("blocks"):
            _warn(f"{job} has no blocks; writing an empty document", quiet=quiet)
        document = build_document(data, config)
        payload = document.finalize()
        output_path = output or job.with_suffix(".pdf")
        output_path.write_bytes(payload)
        if not quiet:
            pages = document.total_page_number
            console.print(f"{output_path} ([muted]{pages} page{'s' if pages != 1 else ''}[/muted])")

    _run_cli(_run, debug=bool(_ctx_value(ctx, "debug")))


@app.command(help="Bundle finished PDFs into one ZIP archive.")
def bundle(
    ctx: typer.Context,
    inputs: list[Path] = typer.Argument(..., help="PDF files to bundle."),
    output: Path = typer.Option(
        Path("documents.zip"),
        "--output",
        "-o",
        help="Output ZIP path.",
        rich_help_panel="Outputs",
    ),
) -> None:
    quiet = bool(_ctx_value(ctx, "quiet"))

    def _run() -> None:
        entries = [(path.name, path.read_bytes()) for path in inputs]
        output.write_bytes(zip_documents(entries))
        if not quiet:
            console.print(str(output))

    _run_cli(_run, debug=bool(_ctx_value(ctx, "debug")))


@app.command("init-config", help="Copy default configs to the user config directory.")
def init_config(ctx: typer.Context) -> None:
    quiet = bool(_ctx_value(ctx, "quiet"))

    def _run() -> None:
        created = user_config_needs_init()
        path = init_user_config()
        if quiet:
            return
        if created:
            console.print(f"User config ready at {path}")
        else:
            console.print(f"[muted]User config already present at {path}[/muted]")

    _run_cli(_run, debug=bool(_ctx_value(ctx, "debug")))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
