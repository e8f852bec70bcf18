"""Human/JSON output for ServiceResult.

Two shapes of output:
- ``format_result`` renders one-off results (graph check, load failure)
  through Rich, or as indented JSON.
- ``format_query`` renders one line of the interactive query protocol:
  the path joined by the separator, ``No path from <start> to <end>``,
  or a compact JSON object.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.text import Text

from graphwalk.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from graphwalk.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags derived from settings."""

    json_output: bool = False
    verbose: bool = False
    separator: str = " "


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    console = create_console()
    if result.ok:
        _render_ok(console, result)
    else:
        _render_error(console, result, verbose=settings.verbose)
    return get_output(console).rstrip("\n")


def format_query(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ``find_path`` result as a single protocol line."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json()
    if result.ok:
        return settings.separator.join(result.data["path"])
    return result.error.message if result.error else "Unknown error"


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="gw.key")
    if key == "source":
        v = Text(str(value), style="gw.path")
    elif key in ("name", "referenced_by", "missing"):
        v = Text(str(value), style="gw.node")
    elif isinstance(value, int):
        v = Text(str(value), style="gw.count")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_ok(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="gw.ok"), Text(f"  {result.op}", style="gw.op"), sep="")
    for key, value in result.data.items():
        _field(console, key, value)


def _render_error(console: Console, result: ServiceResult, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="gw.error"),
        Text(f"  {result.op}", style="gw.op"),
        Text(f" — {msg}"),
        sep="",
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for key, value in err.detail.items():
            _field(console, key, value)
