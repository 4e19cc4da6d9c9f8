# SPDX-License-Identifier: MIT

from weekgrid import state as app_state
from weekgrid.model.user_data import UserData
from weekgrid.repository.configuration import CONFIGURATION_REPO
from weekgrid.repository.gateway import get_user_data_gateway
from weekgrid.service.recurrence import WEEKDAYS
from weekgrid.template.user_data import get_user_data_template


def __active_user_data() -> UserData:
    config = CONFIGURATION_REPO.get_config()
    user_id = app_state.get_active_user() or config["default_user"]
    if not user_id:
        return get_user_data_template()
    return get_user_data_gateway(config["storage_backend"]).load(user_id)


def complete_tag(incomplete: str) -> list[str]:
    """Return list of available tags for shell completion."""
    tag_items = __active_user_data()["tag_items"]
    return [item["tag_name"] for item in tag_items if item["tag_name"].startswith(incomplete)]


def complete_tag_type(incomplete: str) -> list[str]:
    """Return list of available tag types for shell completion."""
    tags = __active_user_data()["tags"]
    return [tag["tag_type"] for tag in tags if tag["tag_type"].startswith(incomplete)]


def complete_user(incomplete: str) -> list[str]:
    config = CONFIGURATION_REPO.get_config()
    users = get_user_data_gateway(config["storage_backend"]).list_users()
    return [user for user in users if user.startswith(incomplete)]


def complete_weekday(incomplete: str) -> list[str]:
    return [day for day in WEEKDAYS if day.startswith(incomplete)]
