# SPDX-License-Identifier: MIT

import logging
from pathlib import Path

import pendulum
import pytest
from yaml import safe_load

from conftest import make_meeting
from tempora.repository.snapshot import (
    SnapshotError,
    dump_meetings,
    load_snapshot,
    parse_snapshot,
    save_meetings,
)
from tempora.service.accounting import year_to_date
from tempora.service.time_entry import entry_minutes

SNAPSHOT = """
settings:
  contract_hours_per_week: 32
tags:
  - id: t1
    name: urgent
    color: "#ff0000"
actions:
  - id: a1
    title: Write report
    status: Doing
    due_date: 2025-03-20
    tag_ids: [t1]
    is_focus: true
  - id: a2
    title: Broken
    status: Someday
meetings:
  - id: m1
    title: Standup
    start: 2025-03-12 09:00
    end: "2025-03-12T09:15:00"
  - id: m2
    title: Legacy
    date_time: 2025-03-13 14:00:00
    label_ids: [t1]
  - id: m3
    title: No start
time_entries:
  - id: e1
    date: 2025-03-10
    type: work
    start_time: 09:00
    end_time: 17:00
    break_minutes: 30
  - id: e2
    date: "2025-03-11"
    type: vacation
    duration: -480
  - id: e3
    date: sometime
    duration_minutes: 60
  - id: e4
    date: 2025-03-11
    type: work
    duration_minutes: -60
"""


def write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "snapshot.yaml"
    path.write_text(text)
    return path


def test_load_snapshot(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.WARNING):
        snapshot = load_snapshot(write(tmp_path, SNAPSHOT))

    assert snapshot["settings"] == {
        "contract_hours_per_week": 32,
        "vacation_days_per_year": None,
    }
    assert snapshot["tags"][0]["color"] == "#ff0000"

    assert [a["id"] for a in snapshot["actions"]] == ["a1"]
    action = snapshot["actions"][0]
    assert action["due_date"] == pendulum.naive(2025, 3, 20)
    assert action["tag_ids"] == ["t1"]
    assert action["is_focus"]

    standup, legacy = snapshot["meetings"]
    assert standup["start"] == pendulum.naive(2025, 3, 12, 9)
    assert standup["end"] == pendulum.naive(2025, 3, 12, 9, 15)
    assert legacy["start"] == pendulum.naive(2025, 3, 13, 14)
    assert legacy["end"] is None
    assert legacy["tag_ids"] == ["t1"]

    assert [e["id"] for e in snapshot["time_entries"]] == ["e1", "e2", "e3"]
    work, vacation, undated = snapshot["time_entries"]
    assert work["date"] == pendulum.date(2025, 3, 10)
    assert entry_minutes(work) == 450
    assert entry_minutes(vacation) == -480
    assert undated["date"] == "sometime"

    assert "Someday" in caplog.text
    assert "m3" in caplog.text
    assert "e4" in caplog.text


def test_loaded_entries_feed_the_accounting(tmp_path: Path):
    snapshot = load_snapshot(write(tmp_path, SNAPSHOT))
    balance = year_to_date(
        snapshot["time_entries"], snapshot["settings"], 2025, pendulum.date(2025, 3, 14)
    )
    assert balance["credited_minutes"] == 450 - 480


def test_empty_snapshot(tmp_path: Path):
    snapshot = load_snapshot(write(tmp_path, ""))
    assert snapshot == {
        "actions": [],
        "meetings": [],
        "time_entries": [],
        "tags": [],
        "settings": None,
    }


def test_snapshot_errors(tmp_path: Path):
    with pytest.raises(SnapshotError):
        load_snapshot(tmp_path / "missing.yaml")
    with pytest.raises(SnapshotError):
        load_snapshot(write(tmp_path, "actions: [unclosed"))
    with pytest.raises(SnapshotError):
        parse_snapshot(["not", "a", "mapping"])
    with pytest.raises(SnapshotError):
        parse_snapshot({"meetings": {"id": "m1"}})


def test_save_meetings(tmp_path: Path):
    meetings = [
        make_meeting(pendulum.naive(2025, 3, 12, 9), pendulum.naive(2025, 3, 12, 10), title="Review")
    ]
    meetings[0]["id"] = None
    out = tmp_path / "out" / "meetings.yaml"
    save_meetings(out, meetings)

    written = safe_load(out.read_text())
    assert written == safe_load(dump_meetings(meetings))
    assert written["meetings"][0]["title"] == "Review"
    assert written["meetings"][0]["start"] == "2025-03-12T09:00:00"
    assert written["meetings"][0]["id"] is None

    reloaded = load_snapshot(out)
    assert reloaded["meetings"][0]["end"] == pendulum.naive(2025, 3, 12, 10)


def test_meetings_ending_before_they_start_are_skipped(caplog: pytest.LogCaptureFixture):
    def raw_meeting(meeting_id: str, start: str, end: str) -> dict[str, str]:
        return {"id": meeting_id, "title": meeting_id, "start": start, "end": end}

    with caplog.at_level(logging.WARNING):
        snapshot = parse_snapshot(
            {
                "meetings": [
                    raw_meeting("m1", "2025-03-12 14:00", "2025-03-12 13:00"),
                    raw_meeting("m2", "2025-03-12 15:00", "2025-03-12 15:00"),
                    raw_meeting("m3", "2025-03-12 16:00", "2025-03-12 16:30"),
                ]
            }
        )

    assert [m["id"] for m in snapshot["meetings"]] == ["m3"]
    assert "m1" in caplog.text
    assert "m2" in caplog.text
