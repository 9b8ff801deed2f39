"""
Interactive terminal prompts.

The credential flow talks to the user only through a Prompter, so it can be
scripted in tests.
"""

from typing import Protocol

import typer


class Prompter(Protocol):
    """What the credential flow needs from an interactive channel."""

    def ask(self, message: str, hide_input: bool = False) -> str: ...

    def confirm(self, message: str, default: bool = False) -> bool: ...

    def warn(self, message: str) -> None: ...

    def fatal(self, message: str) -> None: ...


class TyperPrompter:
    """Prompter reading from and writing to the terminal via typer."""

    def ask(self, message: str, hide_input: bool = False) -> str:
        return typer.prompt(message, hide_input=hide_input)

    def confirm(self, message: str, default: bool = False) -> bool:
        return typer.confirm(message, default=default)

    def warn(self, message: str) -> None:
        typer.echo(
            typer.style("!", fg=typer.colors.RED, bold=True)
            + " "
            + typer.style(message, fg=typer.colors.BRIGHT_BLACK, bold=True)
        )

    def fatal(self, message: str) -> None:
        typer.echo(
            typer.style("✕", fg=typer.colors.RED, bold=True)
            + " "
            + typer.style(message, fg=typer.colors.BRIGHT_BLACK, bold=True),
            err=True,
        )
