# SPDX-License-Identifier: MIT

from pathlib import Path

from typer.testing import CliRunner
from yaml import safe_load

from tempora.terminal.app import app

runner = CliRunner()

NOW = ["--now", "2025-03-12 11:30"]

SNAPSHOT = """
tags:
  - id: t1
    name: urgent
    color: "#ff0000"
actions:
  - id: a1
    title: Write report
    due_date: 2025-03-01
  - id: a2
    title: Plan offsite
    start_date: 2025-03-14
  - id: a3
    title: Call bank
meetings:
  - id: m1
    title: Review
    start: "2025-03-12 14:15"
    end: "2025-03-12 14:40"
    tag_ids: [t1]
  - id: m2
    title: Planning
    start: "2025-03-20 10:00"
time_entries:
  - date: 2025-03-10
    start_time: "09:00"
    end_time: "17:30"
    break_minutes: 30
  - date: 2025-03-12
    duration_minutes: 120
  - date: 2025-08-04
    type: vacation
    duration_minutes: 480
"""


def snapshot_file(tmp_path: Path) -> str:
    path = tmp_path / "snapshot.yaml"
    path.write_text(SNAPSHOT)
    return str(path)


def test_calendar_day_prints_geometry(tmp_path: Path):
    result = runner.invoke(app, NOW + ["calendar", "day", "--snapshot", snapshot_file(tmp_path)])
    assert result.exit_code == 0, result.output
    assert "Review" in result.output
    assert "855" in result.output
    assert "Call bank" in result.output
    assert "Write report" not in result.output
    assert "Plan offsite" not in result.output


def test_calendar_aliases_and_other_views(tmp_path: Path):
    path = snapshot_file(tmp_path)
    for view in ("w", "month", "y"):
        result = runner.invoke(app, NOW + ["cal", view, "-s", path, "--date", "2025-03-14"])
        assert result.exit_code == 0, result.output
    week = runner.invoke(app, NOW + ["cal", "w", "-s", path])
    assert "Plan offsite" in week.output


def test_no_header(tmp_path: Path):
    path = snapshot_file(tmp_path)
    with_header = runner.invoke(app, NOW + ["calendar", "day", "-s", path])
    without_header = runner.invoke(app, NOW + ["--no-header", "calendar", "day", "-s", path])
    assert "calendar day" in with_header.output
    assert "calendar day" not in without_header.output


def test_report_summary(tmp_path: Path):
    path = snapshot_file(tmp_path)
    result = runner.invoke(app, NOW + ["report", "summary", "-s", path])
    assert result.exit_code == 0, result.output
    assert "overtime balance" in result.output

    ranged = runner.invoke(
        app, NOW + ["r", "s", "-s", path, "--start", "2025-03-10", "--end", "2025-03-14"]
    )
    assert ranged.exit_code == 0, ranged.output
    assert "2025-03-10 - 2025-03-14" in ranged.output


def test_report_summary_rejects_mixed_periods(tmp_path: Path):
    path = snapshot_file(tmp_path)
    result = runner.invoke(
        app, NOW + ["report", "summary", "-s", path, "--year", "2025", "--start", "2025-01-01"]
    )
    assert result.exit_code == 1
    reversed_range = runner.invoke(
        app, NOW + ["report", "summary", "-s", path, "--start", "2025-02-01", "--end", "2025-01-01"]
    )
    assert reversed_range.exit_code == 1


def test_report_year_and_dashboard(tmp_path: Path):
    path = snapshot_file(tmp_path)
    year = runner.invoke(app, NOW + ["report", "year", "-s", path])
    assert year.exit_code == 0, year.output
    assert "planned vacation" in year.output

    dashboard = runner.invoke(app, NOW + ["report", "dashboard", "-s", path])
    assert dashboard.exit_code == 0, dashboard.output
    assert "Write report" in dashboard.output
    assert "Planning" in dashboard.output


def test_missing_snapshot_fails(tmp_path: Path):
    result = runner.invoke(app, NOW + ["report", "summary", "-s", str(tmp_path / "none.yaml")])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_meeting_expand_writes_instances(tmp_path: Path):
    out = tmp_path / "meetings.yaml"
    result = runner.invoke(
        app,
        [
            "meeting",
            "expand",
            "Standup",
            "--start",
            "2025-01-06 09:00",
            "--end",
            "2025-01-06 09:30",
            "--every",
            "1",
            "--unit",
            "weeks",
            "--until",
            "2025-02-03",
            "--out",
            str(out),
        ],
    )
    assert result.exit_code == 0, result.output

    meetings = safe_load(out.read_text())["meetings"]
    assert len(meetings) == 5
    assert meetings[-1]["start"] == "2025-02-03T09:00:00"
    assert meetings[-1]["end"] == "2025-02-03T09:30:00"


def test_meeting_expand_rejects_bad_input():
    backwards = runner.invoke(
        app,
        ["meeting", "expand", "Oops", "--start", "2025-01-06 09:00", "--end", "2025-01-06 08:00"],
    )
    assert backwards.exit_code == 1
    assert "must end after" in backwards.output

    zero = runner.invoke(
        app,
        [
            "m",
            "e",
            "Oops",
            "--start",
            "2025-01-06 09:00",
            "--every",
            "0",
            "--unit",
            "day",
            "--until",
            "2025-01-10",
        ],
    )
    assert zero.exit_code == 1

    unit = runner.invoke(app, ["m", "e", "Oops", "--start", "2025-01-06 09:00", "--unit", "hour"])
    assert unit.exit_code == 2


def test_config_set_and_view(isolated_configuration: Path):
    result = runner.invoke(app, ["config", "set", "--default-view", "month", "--day-window-start", "8"])
    assert result.exit_code == 0, result.output
    assert safe_load(isolated_configuration.read_text())["default_view"] == "month"

    view = runner.invoke(app, ["config", "view"])
    assert view.exit_code == 0, view.output
    assert "08:00" in view.output

    invalid = runner.invoke(app, ["config", "set", "--default-view", "fortnight"])
    assert invalid.exit_code == 1
