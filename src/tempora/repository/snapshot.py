# SPDX-License-Identifier: MIT

import datetime
import logging
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar, Union, cast

import pendulum
from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from tempora import time
from tempora.model.action import ACTION_STATUSES, Action
from tempora.model.entity_type import EntityType
from tempora.model.meeting import Meeting
from tempora.model.settings import Settings
from tempora.model.snapshot import Snapshot
from tempora.model.tag import Tag
from tempora.model.time_entry import TIME_ENTRY_TYPES, TimeEntry
from tempora.service.meeting import MeetingValidationError, validate_meeting
from tempora.service.time_entry import (
    TimeEntryValidationError,
    parse_duration,
    validate_time_entry,
)

logger = logging.getLogger(__name__)

_Record = TypeVar("_Record")


class SnapshotError(Exception):
    """Raised when a snapshot file cannot be read or has the wrong shape."""

    pass


def _first(raw: dict[str, Any], *keys: str) -> Any:
    """Value of the first present key; exports use both current and legacy column names."""
    for key in keys:
        if key in raw and raw[key] is not None:
            return raw[key]
    return None


def _datetime_value(value: Any) -> Optional[pendulum.DateTime]:
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        return time.naive(pendulum.instance(value))
    if isinstance(value, datetime.date):
        return pendulum.naive(value.year, value.month, value.day)
    return time.datetime_from_str(str(value))


def _date_value(value: Any) -> Optional[pendulum.Date]:
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        return pendulum.date(value.year, value.month, value.day)
    if isinstance(value, datetime.date):
        return pendulum.date(value.year, value.month, value.day)
    return time.date_from_str(str(value))


def _time_value(value: Any) -> Optional[pendulum.Time]:
    if value is None:
        return None
    if isinstance(value, int):
        # YAML 1.1 reads an unquoted 17:30 as the base-60 integer 1050
        hour, minute = divmod(value, 60)
        return pendulum.time(hour, minute)
    return time.time_from_str(str(value))


def _string_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return [str(item) for item in value]


def _convert_action_for_deserialization(raw: dict[str, Any]) -> Action:
    status = raw.get("status") or "Open"
    if status not in ACTION_STATUSES:
        raise ValueError(f"unknown action status {status!r}")
    return {
        "id": _first(raw, "id"),
        "entity_type": EntityType.ACTION,
        "title": str(raw.get("title") or ""),
        "description": raw.get("description"),
        "status": status,
        "priority": raw.get("priority") or "Medium",
        "start_date": _datetime_value(raw.get("start_date")),
        "due_date": _datetime_value(raw.get("due_date")),
        "created_at": _datetime_value(raw.get("created_at")),
        "updated_at": _datetime_value(raw.get("updated_at")),
        "tag_ids": _string_list(_first(raw, "tag_ids", "label_ids")),
        "tags": _string_list(raw.get("tags")),
        "meeting_id": raw.get("meeting_id"),
        "is_focus": bool(raw.get("is_focus", False)),
    }


def _convert_meeting_for_deserialization(raw: dict[str, Any]) -> Meeting:
    start = _datetime_value(_first(raw, "start", "date_time"))
    if start is None:
        raise ValueError("meeting has no start")
    meeting: Meeting = {
        "id": _first(raw, "id"),
        "entity_type": EntityType.MEETING,
        "title": str(raw.get("title") or ""),
        "start": start,
        "end": _datetime_value(_first(raw, "end", "end_time")),
        "location": raw.get("location"),
        "participants": raw.get("participants"),
        "notes": raw.get("notes"),
        "tag_ids": _string_list(_first(raw, "tag_ids", "label_ids")),
        "tags": _string_list(raw.get("tags")),
        "created_at": _datetime_value(raw.get("created_at")),
        "updated_at": _datetime_value(raw.get("updated_at")),
    }
    return validate_meeting(meeting)


def _convert_time_entry_for_deserialization(raw: dict[str, Any]) -> TimeEntry:
    entry_type = raw.get("type")
    if entry_type is not None and entry_type not in TIME_ENTRY_TYPES:
        raise ValueError(f"unknown time entry type {entry_type!r}")

    raw_date = raw.get("date")
    entry_date: Union[pendulum.Date, str]
    if isinstance(raw_date, datetime.date):
        entry_date = cast(pendulum.Date, _date_value(raw_date))
    else:
        # Kept as stored; unparsable dates are skipped by the accounting engine
        entry_date = "" if raw_date is None else str(raw_date)

    minutes = _first(raw, "duration_minutes", "duration")
    entry: TimeEntry = {
        "id": raw.get("id"),
        "entity_type": EntityType.TIME_ENTRY,
        "date": entry_date,
        "type": entry_type,
        "duration": parse_duration(
            int(minutes) if minutes is not None else None,
            _time_value(raw.get("start_time")),
            _time_value(raw.get("end_time")),
            int(_first(raw, "break_minutes", "break_duration") or 0),
        ),
        "description": raw.get("description"),
        "action_id": raw.get("action_id"),
    }
    return validate_time_entry(entry)


def _convert_tag_for_deserialization(raw: dict[str, Any]) -> Tag:
    color = raw.get("color")
    return {
        "id": raw.get("id"),
        "entity_type": EntityType.TAG,
        "name": str(raw.get("name") or ""),
        "color": None if color is None else str(color),
    }


def _convert_settings_for_deserialization(raw: dict[str, Any]) -> Settings:
    return cast(
        Settings,
        {
            "contract_hours_per_week": raw.get("contract_hours_per_week"),
            "vacation_days_per_year": raw.get("vacation_days_per_year"),
        },
    )


def _convert_records(
    kind: str,
    raw_records: Any,
    convert: Callable[[dict[str, Any]], _Record],
) -> list[_Record]:
    if raw_records is None:
        return []
    if not isinstance(raw_records, list):
        raise SnapshotError(f"'{kind}' must be a list")

    records: list[_Record] = []
    for index, raw in enumerate(raw_records):
        if not isinstance(raw, dict):
            logger.warning("Skipping %s #%d: not a mapping", kind, index)
            continue
        try:
            records.append(convert(raw))
        except (
            ValueError,
            TypeError,
            MeetingValidationError,
            TimeEntryValidationError,
        ) as e:
            logger.warning("Skipping %s #%d (%s): %s", kind, index, raw.get("id"), e)
    return records


def parse_snapshot(raw_snapshot: Any) -> Snapshot:
    if raw_snapshot is None:
        raw_snapshot = {}
    if not isinstance(raw_snapshot, dict):
        raise SnapshotError("snapshot must be a mapping")

    raw_settings = raw_snapshot.get("settings")
    if raw_settings is not None and not isinstance(raw_settings, dict):
        raise SnapshotError("'settings' must be a mapping")

    return {
        "actions": _convert_records(
            "actions", raw_snapshot.get("actions"), _convert_action_for_deserialization
        ),
        "meetings": _convert_records(
            "meetings", raw_snapshot.get("meetings"), _convert_meeting_for_deserialization
        ),
        "time_entries": _convert_records(
            "time_entries",
            raw_snapshot.get("time_entries"),
            _convert_time_entry_for_deserialization,
        ),
        "tags": _convert_records(
            "tags", raw_snapshot.get("tags"), _convert_tag_for_deserialization
        ),
        "settings": (
            None
            if raw_settings is None
            else _convert_settings_for_deserialization(raw_settings)
        ),
    }


def load_snapshot(path: Path) -> Snapshot:
    """Read a YAML snapshot exported from the data store."""
    try:
        raw_snapshot = load(path.read_text(), Loader=Loader)
    except OSError as e:
        raise SnapshotError(f"Cannot read snapshot {path}: {e}") from e
    except YAMLError as e:
        raise SnapshotError(f"Snapshot {path} is not valid YAML: {e}") from e

    snapshot = parse_snapshot(raw_snapshot)
    logger.debug(
        "Loaded %d actions, %d meetings, %d time entries and %d tags from %s",
        len(snapshot["actions"]),
        len(snapshot["meetings"]),
        len(snapshot["time_entries"]),
        len(snapshot["tags"]),
        path,
    )
    return snapshot


def _convert_meeting_for_serialization(meeting: Meeting) -> dict[str, Any]:
    return {
        "id": meeting["id"],
        "title": meeting["title"],
        "start": time.datetime_to_iso_str(meeting["start"]),
        "end": time.datetime_to_iso_str_optional(meeting["end"]),
        "location": meeting["location"],
        "participants": meeting["participants"],
        "notes": meeting["notes"],
        "tag_ids": list(meeting["tag_ids"]),
        "tags": list(meeting["tags"]),
    }


def dump_meetings(meetings: list[Meeting]) -> str:
    """YAML document of meetings, ready for a bulk insert."""
    return cast(
        str,
        dump(
            {"meetings": [_convert_meeting_for_serialization(m) for m in meetings]},
            Dumper=Dumper,
            sort_keys=False,
        ),
    )


def save_meetings(path: Path, meetings: list[Meeting]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_meetings(meetings))
