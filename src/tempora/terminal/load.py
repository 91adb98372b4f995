# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from tempora.configuration import Configuration, resolve_snapshot_path
from tempora.model.snapshot import Snapshot
from tempora.repository.configuration import CONFIGURATION_REPO, ConfigurationError
from tempora.repository.snapshot import SnapshotError, load_snapshot


def load_config() -> Configuration:
    try:
        return CONFIGURATION_REPO.get_config()
    except ConfigurationError as e:
        Console().print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def load_snapshot_or_exit(snapshot_path: Optional[Path]) -> Snapshot:
    """Load the snapshot given on the command line or the configured one."""
    path = resolve_snapshot_path(load_config(), snapshot_path)
    try:
        return load_snapshot(path)
    except SnapshotError as e:
        Console().print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
