# SPDX-License-Identifier: MIT

from dataclasses import dataclass
from typing import Literal, TypeAlias

from weekgrid.model.entity_id import EntityId
from weekgrid.model.schedule import Schedule

ResizeEdge = Literal["top", "bottom"]


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Dragging:
    schedule_id: EntityId
    # distance between the pointer and the top of the dragged block
    pointer_offset_y: float


@dataclass(frozen=True)
class Resizing:
    schedule_id: EntityId
    edge: ResizeEdge


@dataclass(frozen=True)
class Copying:
    schedule: Schedule
    pointer_offset_y: float


InteractionMode: TypeAlias = Idle | Dragging | Resizing | Copying

IDLE = Idle()
