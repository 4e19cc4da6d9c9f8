# SPDX-License-Identifier: MIT

import re
from typing import Protocol
from urllib.parse import quote

from weekgrid import configuration
from weekgrid.model.user_data import SaveResult, UserData


class UserDataGateway(Protocol):
    """
    The persistence boundary for a user's whole data bundle.

    load never raises: a user without stored data, or with unreadable data,
    gets a default shaped bundle. save always writes the complete bundle and
    reports failure through its result instead of raising.
    """

    def load(self, user_id: str) -> UserData: ...

    def save(self, user_id: str, user_data: UserData) -> SaveResult: ...

    def list_users(self) -> list[str]: ...


def safe_file_stem(user_id: str) -> str:
    encoded = quote(user_id, safe="")
    return re.sub(r"[^a-zA-Z0-9_-]", "_", encoded)


def get_user_data_gateway(
    storage_backend: configuration.StorageBackend,
) -> UserDataGateway:
    # Imported here so the backends pick up DATA_PATH after configuration load
    from weekgrid.repository.document import DocumentUserDataRepository
    from weekgrid.repository.registry import UserRegistry
    from weekgrid.repository.rows import RowUserDataRepository

    registry = UserRegistry(configuration.DATA_USER_REGISTRY_PATH)
    if storage_backend == "rows":
        return RowUserDataRepository(configuration.DATA_ROWS_PATH, registry)
    if storage_backend == "document":
        return DocumentUserDataRepository(configuration.DATA_USERS_PATH, registry)
    raise ValueError(f"Unknown storage backend: {storage_backend}")
