# SPDX-License-Identifier: MIT

from tempora.model.meeting import Meeting


class MeetingValidationError(Exception):
    """Raised when a meeting's time span is invalid."""

    pass


def validate_meeting(meeting: Meeting) -> Meeting:
    """
    Check that a meeting ends after it starts.

    A meeting without an end is accepted; it is treated as one hour long.
    Returns the meeting unchanged, raises MeetingValidationError otherwise.
    """
    if meeting["end"] is not None and meeting["end"] <= meeting["start"]:
        raise MeetingValidationError(
            f"Meeting '{meeting['title']}' must end after it starts "
            f"({meeting['start'].isoformat()} - {meeting['end'].isoformat()})"
        )
    return meeting
