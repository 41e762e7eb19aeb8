from __future__ import annotations

from typing import Iterable

from configurator.application.exceptions import InvalidInputError
from configurator.domain.entities.selection_action import ActionKind, SelectionAction
from configurator.domain.entities.service import ServiceType, ServiceYear


def coerce_service(value: ServiceType | str) -> ServiceType:
    try:
        return ServiceType(value)
    except ValueError as e:
        raise InvalidInputError(f"Unknown service: {value!r}") from e


def coerce_year(value: ServiceYear | int) -> ServiceYear:
    try:
        return ServiceYear(value)
    except ValueError as e:
        raise InvalidInputError(f"Unknown service year: {value!r}") from e


def coerce_selection(selected: Iterable[ServiceType | str]) -> tuple[ServiceType, ...]:
    """
    Normalize a caller-owned selection into a tuple of ServiceType.
    Order is kept and repeated entries collapse onto their first occurrence.
    """
    services: list[ServiceType] = []
    for value in selected:
        service = coerce_service(value)
        if service not in services:
            services.append(service)
    return tuple(services)


def coerce_action(action: SelectionAction) -> SelectionAction:
    try:
        kind = ActionKind(action.kind)
    except ValueError as e:
        raise InvalidInputError(f"Unknown action kind: {action.kind!r}") from e
    return SelectionAction(kind=kind, service=coerce_service(action.service))
