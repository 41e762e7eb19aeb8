from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from configurator.domain.entities.service import ServiceYear


@dataclass(frozen=True)
class PriceTable:
    photography: Mapping[ServiceYear, int]
    video_recording: Mapping[ServiceYear, int]
    package: Mapping[ServiceYear, int]  # Photography + VideoRecording bundle
    wedding_session_discount: int
    wedding_session_regular: int
    bluray: int
    two_day_event: int
    complimentary_session_year: ServiceYear | None = None  # session free with Photography


DEFAULT_PRICE_TABLE = PriceTable(
    photography=MappingProxyType(
        {
            ServiceYear.Y2020: 1700,
            ServiceYear.Y2021: 1800,
            ServiceYear.Y2022: 1900,
        }
    ),
    video_recording=MappingProxyType(
        {
            ServiceYear.Y2020: 1700,
            ServiceYear.Y2021: 1800,
            ServiceYear.Y2022: 1900,
        }
    ),
    package=MappingProxyType(
        {
            ServiceYear.Y2020: 2200,
            ServiceYear.Y2021: 2300,
            ServiceYear.Y2022: 2500,
        }
    ),
    wedding_session_discount=300,
    wedding_session_regular=600,
    bluray=300,
    two_day_event=400,
    complimentary_session_year=ServiceYear.Y2022,
)
