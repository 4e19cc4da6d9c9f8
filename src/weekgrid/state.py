# SPDX-License-Identifier: MIT

from contextvars import ContextVar
from typing import Optional

_active_user: ContextVar[Optional[str]] = ContextVar("active_user", default=None)


def set_active_user(value: Optional[str]) -> None:
    _active_user.set(value)


def get_active_user() -> Optional[str]:
    return _active_user.get()
