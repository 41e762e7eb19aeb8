from functools import lru_cache

from configurator.application.ports.price_table import PriceTablePort
from configurator.application.use_cases.pricing import PricingUseCase
from configurator.application.use_cases.selection import SelectionUseCase
from configurator.core.config import settings
from configurator.domain.entities.service import ServiceYear
from configurator.infrastructure.pricing.static_price_table import StaticPriceTableStore


@lru_cache
def get_price_table() -> PriceTablePort:
    return StaticPriceTableStore()


@lru_cache
def get_selection_use_case() -> SelectionUseCase:
    return SelectionUseCase()


@lru_cache
def get_pricing_use_case() -> PricingUseCase:
    return PricingUseCase(price_table=get_price_table())


def get_default_year() -> ServiceYear:
    return ServiceYear(settings.DEFAULT_SERVICE_YEAR)


def get_container() -> dict[str, object]:
    return {
        "selection": get_selection_use_case(),
        "pricing": get_pricing_use_case(),
        "default_year": get_default_year(),
    }
