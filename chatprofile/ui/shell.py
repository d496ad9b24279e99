"""
Non-interactive output for the profile editor CLI.
"""

from __future__ import annotations

import json
from typing import Optional

from rich.console import Console
from rich.table import Table

from chatprofile.config.models import EditorConfig
from chatprofile.profiles import SettingsRecord, profile_to_raw
from chatprofile.ui.tui.state import ProfileViewModel


def build_profile_table(record: Optional[SettingsRecord], config: EditorConfig) -> Table:
    """Build a table of the read-only projection of ``record``."""
    view_model = ProfileViewModel(record, config=config, read_only=True)
    title = (record.name if record is not None else "") or "New profile"
    table = Table(title=title, show_lines=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    for row in view_model.table_rows():
        table.add_row(row.key, row.value)
    return table


def run_show(
    record: Optional[SettingsRecord],
    config: EditorConfig,
    *,
    as_json: bool = False,
    console: Optional[Console] = None,
) -> int:
    """Print a profile. Returns the exit code."""
    console = console or Console()
    if as_json:
        payload = profile_to_raw(record) if record is not None else None
        console.print_json(json.dumps(payload))
    else:
        console.print(build_profile_table(record, config))
    return 0
