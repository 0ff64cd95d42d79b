"""Subcommand modules for graphvisit.

Provides register_commands() which uses deferred imports to keep
``graphvisit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups on the root CLI group."""
    from graphvisit.commands.scc import scc
    from graphvisit.commands.traverse import traverse

    cli.add_command(traverse)
    cli.add_command(scc)
