# SPDX-License-Identifier: MIT

from contextvars import ContextVar
from typing import Optional

import pendulum

from tempora.time import now_local

_now: ContextVar[Optional[pendulum.DateTime]] = ContextVar("now", default=None)


def set_now(value: Optional[pendulum.DateTime]) -> None:
    _now.set(value)


def get_now() -> pendulum.DateTime:
    """The injected clock, or the local wall-clock time when none is set."""
    value = _now.get()
    if value is None:
        return now_local()
    return value
