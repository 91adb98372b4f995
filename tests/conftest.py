# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Optional

import pendulum
import pytest

from tempora import configuration
from tempora.model.action import Action
from tempora.model.meeting import Meeting
from tempora.model.tag import Tag
from tempora.model.time_entry import TimeEntry
from tempora.repository.configuration import CONFIGURATION_REPO
from tempora.service.time_entry import manual_duration, timed_duration
from tempora.template.action import get_action_template
from tempora.template.meeting import get_meeting_template
from tempora.template.tag import get_tag_template
from tempora.template.time_entry import get_time_entry_template


@pytest.fixture(autouse=True)
def isolated_configuration(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    config_path = tmp_path / "config" / "config.yaml"
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "DEFAULT_SNAPSHOT_PATH", tmp_path / "data" / "snapshot.yaml")
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    return config_path


def make_action(title: str = "action", **fields: Any) -> Action:
    action = get_action_template()
    action["id"] = fields.pop("id", title)
    action["title"] = title
    action.update(fields)  # type: ignore[typeddict-item]
    return action


def make_meeting(
    start: pendulum.DateTime,
    end: Optional[pendulum.DateTime] = None,
    title: str = "meeting",
    **fields: Any,
) -> Meeting:
    meeting = get_meeting_template(start)
    meeting["id"] = fields.pop("id", title)
    meeting["title"] = title
    meeting["end"] = end
    meeting.update(fields)  # type: ignore[typeddict-item]
    return meeting


def make_entry(
    date: Any,
    minutes: int = 0,
    type: Optional[str] = "work",
    start: Optional[pendulum.Time] = None,
    end: Optional[pendulum.Time] = None,
    break_minutes: int = 0,
) -> TimeEntry:
    entry = get_time_entry_template(date)
    entry["type"] = type  # type: ignore[typeddict-item]
    if start is not None and end is not None:
        entry["duration"] = timed_duration(start, end, break_minutes)
    else:
        entry["duration"] = manual_duration(minutes)
    return entry


def make_tag(id: str, color: Optional[str], name: Optional[str] = None) -> Tag:
    tag = get_tag_template(name if name is not None else id, color)
    tag["id"] = id
    return tag
