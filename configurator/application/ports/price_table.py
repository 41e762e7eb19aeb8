from __future__ import annotations

from abc import ABC, abstractmethod

from configurator.domain.entities.service import ServiceYear


class PriceTablePort(ABC):
    @abstractmethod
    def photography_price(self, year: ServiceYear) -> int:
        """Price of Photography alone for the given year."""
        raise NotImplementedError

    @abstractmethod
    def video_recording_price(self, year: ServiceYear) -> int:
        """Price of VideoRecording alone for the given year."""
        raise NotImplementedError

    @abstractmethod
    def package_price(self, year: ServiceYear) -> int:
        """Bundle price for Photography and VideoRecording selected together."""
        raise NotImplementedError

    @abstractmethod
    def wedding_session_price(self, discounted: bool) -> int:
        """Wedding session price, discounted when sold alongside a main service."""
        raise NotImplementedError

    @abstractmethod
    def is_session_complimentary(self, year: ServiceYear) -> bool:
        """Whether the wedding session is free with Photography in this year."""
        raise NotImplementedError

    @abstractmethod
    def bluray_price(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def two_day_event_price(self) -> int:
        raise NotImplementedError
