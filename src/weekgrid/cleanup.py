# SPDX-License-Identifier: MIT

import atexit

from weekgrid.repository.configuration import CONFIGURATION_REPO


def flush() -> None:
    # User data is saved on every change; only settings are buffered
    CONFIGURATION_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)
