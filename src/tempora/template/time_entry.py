# SPDX-License-Identifier: MIT

from typing import Union

import pendulum

from tempora.model.entity_type import EntityType
from tempora.model.time_entry import TimeEntry


def get_time_entry_template(date: Union[pendulum.Date, str]) -> TimeEntry:
    return {
        "id": None,
        "entity_type": EntityType.TIME_ENTRY,
        "date": date,
        "type": "work",
        "duration": {"kind": "manual", "minutes": 0},
        "description": None,
        "action_id": None,
    }
