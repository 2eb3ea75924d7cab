"""Click classes for rosterctl commands.

A command lists its usage examples as plain command lines::

    @click.command(cls=RosterCommand, examples=("rosterctl report",))

and gains an eager ``--examples`` flag that prints them as shell prompts and
exits before the callback runs, so no settings or logging are set up.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    for line in ctx.command.examples:  # type: ignore[attr-defined]
        click.echo(f"  $ {line}")
    ctx.exit(0)


class _ExamplesMixin:
    examples: tuple[str, ...]
    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: Sequence[str] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples)
        if self.examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_print_examples,
                    help="Show usage examples.",
                )
            )


class RosterCommand(_ExamplesMixin, click.Command):
    """A command with optional ``--examples``."""


class RosterGroup(_ExamplesMixin, click.Group):
    """Root group; subcommands default to :class:`RosterCommand`."""

    command_class = RosterCommand
