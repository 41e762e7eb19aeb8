from __future__ import annotations

from enum import Enum
from typing import Iterable


class ServiceType(str, Enum):
    PHOTOGRAPHY = "Photography"
    VIDEO_RECORDING = "VideoRecording"
    BLURAY_PACKAGE = "BlurayPackage"
    TWO_DAY_EVENT = "TwoDayEvent"
    WEDDING_SESSION = "WeddingSession"


class ServiceYear(int, Enum):
    Y2020 = 2020
    Y2021 = 2021
    Y2022 = 2022


MAIN_SERVICES = frozenset({ServiceType.PHOTOGRAPHY, ServiceType.VIDEO_RECORDING})

ADDITIONAL_SERVICES = frozenset(
    {
        ServiceType.BLURAY_PACKAGE,
        ServiceType.TWO_DAY_EVENT,
        ServiceType.WEDDING_SESSION,
    }
)


def is_main_service(service: ServiceType) -> bool:
    return service in MAIN_SERVICES


def is_additional_service(service: ServiceType) -> bool:
    return service in ADDITIONAL_SERVICES


def has_main_service_selected(selected: Iterable[ServiceType]) -> bool:
    """True if Photography or VideoRecording is among the selected services."""
    return any(is_main_service(service) for service in selected)
