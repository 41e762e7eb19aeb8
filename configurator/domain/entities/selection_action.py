from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from configurator.domain.entities.service import ServiceType


class ActionKind(str, Enum):
    SELECT = "Select"
    DESELECT = "Deselect"


@dataclass(frozen=True)
class SelectionAction:
    kind: ActionKind
    service: ServiceType

    @staticmethod
    def select(service: ServiceType) -> "SelectionAction":
        return SelectionAction(kind=ActionKind.SELECT, service=service)

    @staticmethod
    def deselect(service: ServiceType) -> "SelectionAction":
        return SelectionAction(kind=ActionKind.DESELECT, service=service)
