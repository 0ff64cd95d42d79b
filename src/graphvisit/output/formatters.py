"""Output mode dispatch.

The CLI renders a ServiceResult for humans (Rich), for scripts (--quiet)
or for machines (--json). ``format_result`` picks the mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from graphvisit.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from graphvisit.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output-mode flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
) -> str:
    """Format a ServiceResult for display.

    JSON takes precedence over quiet, quiet over the Rich rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
