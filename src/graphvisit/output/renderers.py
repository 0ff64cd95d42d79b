"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from graphvisit.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from graphvisit.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Traversals print one vertex per line; component listings print one
    component per line, members separated by spaces.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if "order" in data:
        return "\n".join(str(v) for v in data["order"])
    components = data.get("components", data.get("cyclic_components"))
    if components:
        return "\n".join(" ".join(str(v) for v in c) for c in components)
    if "has_cycle" in data:
        return "true" if data["has_cycle"] else "false"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="gv.ok"), Text(f"  {result.op}", style="gv.op"))


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="gv.key"), Text(str(value)), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the telemetry span tree (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    telemetry = result.meta.get("telemetry")
    if telemetry:
        _render_span(console, telemetry, indent=4)


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    line = f"{' ' * indent}{span.get('duration_ms', 0.0):>8.2f}ms  {span.get('name', '?')}"
    annotations = span.get("annotations")
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line, style="dim")
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


def _component_table(components: list[list[Any]], *, cyclic: list[bool] | None = None) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Size", justify="right")
    table.add_column("Vertices", style="gv.vertex")
    if cyclic is not None:
        table.add_column("Cycle", style="gv.cycle")
    for i, members in enumerate(components):
        row = [str(i), str(len(members)), ", ".join(str(v) for v in members)]
        if cyclic is not None:
            row.append("yes" if cyclic[i] else "")
        table.add_row(*row)
    return table


# ── Op renderers ──────────────────────────────────────────────────────


def _render_traversal(result: ServiceResult, console: Console) -> None:
    """Render visit order as a chain plus the tree edges."""
    data = result.data
    _status_line(console, result)
    _field(console, "source", data["source"])
    _field(console, "visited", data["count"])
    console.print(
        "  " + " → ".join(f"[gv.vertex]{v}[/gv.vertex]" for v in data["order"])
    )
    if data["halted"]:
        console.print(Text("  stopped early", style="gv.warning"))


def _render_components(result: ServiceResult, console: Console) -> None:
    components = result.data["components"]
    _status_line(console, result)
    _field(console, "count", result.data["count"])
    if components:
        console.print(_component_table(components))


def _render_scc(result: ServiceResult, console: Console) -> None:
    components = result.data["components"]
    _status_line(console, result)
    _field(console, "count", result.data["count"])
    _field(console, "has_cycle", result.data["has_cycle"])
    if components:
        console.print(_component_table(components, cyclic=result.data.get("cyclic")))


def _render_cycle(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    if not result.data["has_cycle"]:
        console.print("  No cycles found.")
        return
    for members in result.data["cyclic_components"]:
        console.print("  [gv.cycle]cycle[/gv.cycle] " + ", ".join(str(v) for v in members))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text("ERROR", style="gv.error"), Text(f"  {result.op}", style="gv.op"), "—", msg)
    if verbose and err and err.detail:
        for key, value in err.detail.items():
            _field(console, key, value)


def _render_generic(result: ServiceResult, console: Console) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "bfs": _render_traversal,
    "dfs": _render_traversal,
    "components": _render_components,
    "scc": _render_scc,
    "cycle": _render_cycle,
}
