# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import pendulum
import typer
from rich.logging import RichHandler

from tempora import state as app_state
from tempora.terminal import calendar, configuration, meeting, report
from tempora.terminal.custom_typer import OrderedTyperGroup
from tempora.terminal.load import load_config
from tempora.terminal.parse import parse_datetime
from tempora.view import state as view_state

app = typer.Typer(
    cls=OrderedTyperGroup,
    help="tempora - Calendar placement and time accounting in the CLI",
    no_args_is_help=True,
)
app.add_typer(calendar.app, name="calendar, cal")
app.add_typer(report.app, name="report, r")
app.add_typer(meeting.app, name="meeting, m")
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    now: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--now",
            parser=parse_datetime,
            help="Pretend the current time is this (YYYY-MM-DD HH:mm)",
        ),
    ] = None,
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug details"),
    ] = False,
) -> None:
    """
    tempora - Calendar placement and time accounting in the CLI

    Global options that apply to all commands.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
        force=True,
    )

    app_state.set_now(now)
    view_state.set_show_header(not no_header and load_config()["show_header"])


def run() -> None:
    app()
