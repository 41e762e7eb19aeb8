from __future__ import annotations

from typing import Mapping

from configurator.application.exceptions import InvalidInputError
from configurator.application.ports.price_table import PriceTablePort
from configurator.domain.entities.price_table import DEFAULT_PRICE_TABLE, PriceTable
from configurator.domain.entities.service import ServiceYear


class StaticPriceTableStore(PriceTablePort):
    def __init__(self, table: PriceTable | None = None) -> None:
        self._table = table or DEFAULT_PRICE_TABLE

    def photography_price(self, year: ServiceYear) -> int:
        return self._lookup(self._table.photography, year, "photography")

    def video_recording_price(self, year: ServiceYear) -> int:
        return self._lookup(self._table.video_recording, year, "video recording")

    def package_price(self, year: ServiceYear) -> int:
        return self._lookup(self._table.package, year, "package")

    def wedding_session_price(self, discounted: bool) -> int:
        if discounted:
            return self._table.wedding_session_discount
        return self._table.wedding_session_regular

    def is_session_complimentary(self, year: ServiceYear) -> bool:
        return self._table.complimentary_session_year == year

    def bluray_price(self) -> int:
        return self._table.bluray

    def two_day_event_price(self) -> int:
        return self._table.two_day_event

    @staticmethod
    def _lookup(prices: Mapping[ServiceYear, int], year: ServiceYear, label: str) -> int:
        try:
            return prices[year]
        except KeyError as e:
            raise InvalidInputError(f"No {label} price for year {year!r}") from e
