from __future__ import annotations

import logging
from typing import Iterable

from configurator.application.ports.price_table import PriceTablePort
from configurator.application.utils.coercion import coerce_selection, coerce_year
from configurator.domain.entities.price_result import PriceResult
from configurator.domain.entities.service import (
    ServiceType,
    ServiceYear,
    has_main_service_selected,
)
from configurator.infrastructure.pricing.static_price_table import StaticPriceTableStore


class PricingUseCase:
    def __init__(self, price_table: PriceTablePort) -> None:
        self._price_table = price_table
        self._logger = logging.getLogger(__name__)

    def calculate_price(
        self,
        selected: Iterable[ServiceType | str],
        year: ServiceYear | int,
    ) -> PriceResult:
        """
        Price a selection for a service year.
        The base price covers main services and the wedding session, the final
        price adds the Bluray and two-day event surcharges on top.
        """
        services = frozenset(coerce_selection(selected))
        service_year = coerce_year(year)

        base_price = self._base_services_price(services, service_year)
        final_price = base_price + self._additional_services_price(services)

        self._logger.debug(
            "Price calculated",
            extra={"year": service_year.value, "base_price": base_price, "final_price": final_price},
        )
        return PriceResult(base_price=base_price, final_price=final_price)

    def _base_services_price(self, services: frozenset[ServiceType], year: ServiceYear) -> int:
        has_photography = ServiceType.PHOTOGRAPHY in services
        has_video = ServiceType.VIDEO_RECORDING in services

        price = 0
        if has_photography and has_video:
            price += self._price_table.package_price(year)
        else:
            if has_photography:
                price += self._price_table.photography_price(year)
            if has_video:
                price += self._price_table.video_recording_price(year)

        if ServiceType.WEDDING_SESSION in services:
            if has_photography:
                if not self._price_table.is_session_complimentary(year):
                    price += self._price_table.wedding_session_price(discounted=True)
            elif has_video:
                price += self._price_table.wedding_session_price(discounted=True)
            else:
                price += self._price_table.wedding_session_price(discounted=False)

        return price

    def _additional_services_price(self, services: frozenset[ServiceType]) -> int:
        price = 0
        if ServiceType.BLURAY_PACKAGE in services and ServiceType.VIDEO_RECORDING in services:
            price += self._price_table.bluray_price()
        if ServiceType.TWO_DAY_EVENT in services and has_main_service_selected(services):
            price += self._price_table.two_day_event_price()
        return price


_default_use_case = PricingUseCase(price_table=StaticPriceTableStore())


def calculate_price(
    selected: Iterable[ServiceType | str],
    year: ServiceYear | int,
) -> PriceResult:
    return _default_use_case.calculate_price(selected, year)
