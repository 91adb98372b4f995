# SPDX-License-Identifier: MIT


class EntityType:
    ACTION = "action"
    MEETING = "meeting"
    TIME_ENTRY = "time_entry"
    TAG = "tag"
