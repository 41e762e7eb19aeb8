from dataclasses import dataclass


@dataclass(frozen=True)
class PriceResult:
    base_price: int
    final_price: int  # base_price plus Bluray / two-day event surcharges

    @property
    def additional_price(self) -> int:
        return self.final_price - self.base_price
