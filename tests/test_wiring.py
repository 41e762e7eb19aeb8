"""
Tests for settings, logging setup and dependency wiring.
"""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from configurator.application.use_cases.pricing import PricingUseCase
from configurator.application.use_cases.selection import SelectionUseCase
from configurator.core.config import Settings
from configurator.core.logging_config import ContextFormatter, configure_logging
from configurator.domain.entities.service import ServiceYear
from configurator.wiring.dependencies import (
    get_container,
    get_default_year,
    get_pricing_use_case,
    get_selection_use_case,
)


def test_settings_defaults():
    s = Settings(_env_file=None)
    assert s.LOG_LEVEL == "INFO"
    assert s.DEFAULT_SERVICE_YEAR == 2022


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("DEFAULT_SERVICE_YEAR", "2020")
    assert Settings(_env_file=None).DEFAULT_SERVICE_YEAR == 2020


def test_settings_reject_unknown_year(monkeypatch):
    monkeypatch.setenv("DEFAULT_SERVICE_YEAR", "1999")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_use_cases_are_cached():
    assert isinstance(get_selection_use_case(), SelectionUseCase)
    assert isinstance(get_pricing_use_case(), PricingUseCase)
    assert get_pricing_use_case() is get_pricing_use_case()


def test_container_prices_with_default_year():
    container = get_container()
    assert isinstance(container["default_year"], ServiceYear)
    assert container["default_year"] == get_default_year()
    result = container["pricing"].calculate_price(("WeddingSession",), container["default_year"])
    assert result.base_price == 600


def test_context_formatter_appends_extras():
    formatter = ContextFormatter("%(levelname)s:%(name)s:%(message)s")
    record = logging.LogRecord("configurator", logging.DEBUG, __file__, 1, "Selection rejected", None, None)
    record.service = "BlurayPackage"
    record.reason = "requires_video_recording"
    assert formatter.format(record) == (
        "DEBUG:configurator:Selection rejected | service=BlurayPackage reason=requires_video_recording"
    )


def test_rejected_selection_is_logged(caplog):
    from configurator.domain.entities.selection_action import SelectionAction
    from configurator.domain.entities.service import ServiceType

    with caplog.at_level(logging.DEBUG, logger="configurator.application.use_cases.selection"):
        SelectionUseCase().apply_action((), SelectionAction.select(ServiceType.BLURAY_PACKAGE))
    assert any(getattr(r, "reason", None) == "requires_video_recording" for r in caplog.records)


def test_configure_logging_installs_context_formatter():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, ContextFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
