# SPDX-License-Identifier: MIT


class InvalidTimeError(ValueError):
    """Raised when a wall-clock value is not a well formed "HH:MM" string."""


class ScheduleRejectedError(ValueError):
    """
    Base for every validation rejection of a schedule mutation.

    A rejected mutation leaves the committed schedules untouched.
    """


class OverlapError(ScheduleRejectedError):
    def __init__(self, message: str, conflicts: list[str] | None = None) -> None:
        self.conflicts = conflicts if conflicts is not None else []
        super().__init__(message)


class InvalidTimeRangeError(ScheduleRejectedError):
    pass


class InvalidRecurrenceError(ScheduleRejectedError):
    pass


class InvalidTagError(ValueError):
    pass


class UnknownScheduleError(KeyError):
    pass


class GestureError(RuntimeError):
    """Raised when a pointer gesture starts while another one is active."""
