"""Shared fixtures for weekgrid tests.

Repositories are pointed at a temporary directory, and sessions get an
in-memory gateway and a manual clock so timers can be stepped.
"""

from copy import deepcopy
from pathlib import Path
from typing import Any, Callable

import pytest
from loguru import logger

from weekgrid import configuration
from weekgrid.model.schedule import Schedule
from weekgrid.model.user_data import SaveResult, UserData
from weekgrid.repository.configuration import CONFIGURATION_REPO
from weekgrid.service.calendar import CalendarSession
from weekgrid.template.schedule import get_schedule_template
from weekgrid.template.user_data import get_user_data_template


class InMemoryGateway:
    """Keeps saved bundles in a dict; counts saves."""

    def __init__(self) -> None:
        self.bundles: dict[str, UserData] = {}
        self.save_count = 0

    def load(self, user_id: str) -> UserData:
        if user_id not in self.bundles:
            return get_user_data_template()
        return deepcopy(self.bundles[user_id])

    def save(self, user_id: str, user_data: UserData) -> SaveResult:
        self.save_count += 1
        self.bundles[user_id] = deepcopy(user_data)
        return {"success": True, "error": None}

    def list_users(self) -> list[str]:
        return sorted(self.bundles)


class FailingGateway(InMemoryGateway):
    """Reads like InMemoryGateway but every save fails."""

    def save(self, user_id: str, user_data: UserData) -> SaveResult:
        self.save_count += 1
        return {"success": False, "error": "disk full"}


class ManualClock:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep loguru output out of test runs."""
    logger.remove()
    yield


@pytest.fixture
def data_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point configuration and data paths at tmp_path."""
    data = tmp_path / "data"
    (tmp_path / "config").mkdir()
    monkeypatch.setattr(configuration, "CONFIG_PATH", tmp_path / "config")
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", tmp_path / "config" / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data)
    monkeypatch.setattr(configuration, "DATA_USERS_PATH", data / "users")
    monkeypatch.setattr(configuration, "DATA_ROWS_PATH", data / "rows")
    monkeypatch.setattr(configuration, "DATA_USER_REGISTRY_PATH", data / "users.yaml")
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    return data


@pytest.fixture
def gateway() -> InMemoryGateway:
    return InMemoryGateway()


@pytest.fixture
def failing_gateway() -> FailingGateway:
    return FailingGateway()


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def make_schedule() -> Callable[..., Schedule]:
    def factory(**overrides: Any) -> Schedule:
        schedule = get_schedule_template()
        schedule.update(
            {
                "date": "2025-03-10",
                "start": "09:00",
                "end": "10:00",
                "title": "focus",
                "tag": "",
            }
        )
        schedule.update(overrides)  # type: ignore[typeddict-item]
        return schedule

    return factory


@pytest.fixture
def session(gateway: InMemoryGateway, clock: ManualClock) -> CalendarSession:
    calendar_session = CalendarSession("alice", gateway, clock=clock)
    calendar_session.load()
    return calendar_session
