from __future__ import annotations

import logging
from typing import Iterable

from configurator.application.utils.coercion import coerce_action, coerce_selection
from configurator.domain.entities.selection_action import ActionKind, SelectionAction
from configurator.domain.entities.service import (
    ServiceType,
    has_main_service_selected,
    is_additional_service,
    is_main_service,
)


class SelectionUseCase:
    """Apply Select/Deselect actions to a selection while keeping its dependency rules."""

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def apply_action(
        self,
        current: Iterable[ServiceType | str],
        action: SelectionAction,
    ) -> tuple[ServiceType, ...]:
        """
        Return the selection that results from applying action to current.
        A rejected action returns current unchanged; it never raises for rule violations.
        """
        selected = coerce_selection(current)
        action = coerce_action(action)

        if action.kind == ActionKind.SELECT:
            return self._select(selected, action.service)
        return self._deselect(selected, action.service)

    def _select(
        self,
        selected: tuple[ServiceType, ...],
        service: ServiceType,
    ) -> tuple[ServiceType, ...]:
        if service in selected:
            return self._reject(selected, service, "already_selected")

        # Main services can always be added
        if is_main_service(service):
            return self._accept(selected + (service,), service, ActionKind.SELECT)

        if service == ServiceType.BLURAY_PACKAGE:
            if ServiceType.VIDEO_RECORDING in selected:
                return self._accept(selected + (service,), service, ActionKind.SELECT)
            return self._reject(selected, service, "requires_video_recording")

        if is_additional_service(service) and has_main_service_selected(selected):
            return self._accept(selected + (service,), service, ActionKind.SELECT)

        return self._reject(selected, service, "requires_main_service")

    def _deselect(
        self,
        selected: tuple[ServiceType, ...],
        service: ServiceType,
    ) -> tuple[ServiceType, ...]:
        remaining = _without(selected, service)

        if is_main_service(service):
            # Bluray depends on VideoRecording
            if ServiceType.VIDEO_RECORDING not in remaining:
                remaining = _without(remaining, ServiceType.BLURAY_PACKAGE)
            # TwoDayEvent depends on any main service; WeddingSession never cascades
            if not has_main_service_selected(remaining):
                remaining = _without(remaining, ServiceType.TWO_DAY_EVENT)

        return self._accept(remaining, service, ActionKind.DESELECT)

    def _accept(
        self,
        selected: tuple[ServiceType, ...],
        service: ServiceType,
        kind: ActionKind,
    ) -> tuple[ServiceType, ...]:
        self._logger.debug(
            "Selection updated",
            extra={"action": kind.value, "service": service.value},
        )
        return selected

    def _reject(
        self,
        selected: tuple[ServiceType, ...],
        service: ServiceType,
        reason: str,
    ) -> tuple[ServiceType, ...]:
        self._logger.debug(
            "Selection rejected",
            extra={"action": ActionKind.SELECT.value, "service": service.value, "reason": reason},
        )
        return selected


def _without(selected: tuple[ServiceType, ...], service: ServiceType) -> tuple[ServiceType, ...]:
    return tuple(item for item in selected if item != service)


_default_use_case = SelectionUseCase()


def update_selected_services(
    current: Iterable[ServiceType | str],
    action: SelectionAction,
) -> tuple[ServiceType, ...]:
    return _default_use_case.apply_action(current, action)
