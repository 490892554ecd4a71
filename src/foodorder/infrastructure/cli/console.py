"""Terminal implementations of the screen ports."""

from __future__ import annotations

import click

from foodorder.application.ports import Navigator, Notifier


class ConsoleNavigator(Navigator):

    def navigate(self, route: str) -> None:
        click.echo(f"Order placed. Go to {route} to follow it.")


class ConsoleNotifier(Notifier):

    def alert(self, title: str, message: str) -> None:
        click.secho(title, fg="red", bold=True, err=True)
        click.echo(message, err=True)
