"""
Calendar-day windows and input coercion shared by the analytics engine.

All windows are inclusive calendar-day ranges ending at a reference
date ``as_of``.  ``as_of`` is injected by the caller so every
computation is deterministic; ``None`` means today.
"""

from __future__ import annotations

import datetime
from collections.abc import Iterable, Mapping
from typing import Optional, TypeVar, Union

from pydantic import BaseModel, ValidationError

from app.core.errors import AnalyticsInputError
from app.schemas.thresholds import DEFAULT_THRESHOLDS, ThresholdSettings

ModelT = TypeVar("ModelT", bound=BaseModel)


def resolve_as_of(as_of: Optional[Union[datetime.date, datetime.datetime]]) -> datetime.date:
    """Normalise the reference date (datetimes are truncated to their day)."""
    if as_of is None:
        return datetime.date.today()
    if isinstance(as_of, datetime.datetime):
        return as_of.date()
    return as_of


def trailing_window(as_of: datetime.date, days: int) -> tuple[datetime.date, datetime.date]:
    """Return ``(start, end)`` covering *days* calendar days ending at *as_of*."""
    return as_of - datetime.timedelta(days=days - 1), as_of


def in_window(day: datetime.date, start: datetime.date, end: datetime.date) -> bool:
    return start <= day <= end


def ensure_models(items: Optional[Iterable], model: type[ModelT], label: str) -> list[ModelT]:
    """Coerce a collection into validated *model* instances.

    Accepts model instances and plain mappings (as returned by a record
    store).  Anything else, or a mapping that fails validation, raises
    :class:`AnalyticsInputError` instead of leaking into a computation.
    """
    if items is None:
        return []

    result: list[ModelT] = []
    for index, item in enumerate(items):
        if isinstance(item, model):
            result.append(item)
        elif isinstance(item, Mapping):
            try:
                result.append(model.model_validate(item))
            except ValidationError as e:
                details = [f"[{index}] {'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
                raise AnalyticsInputError(label, details) from e
        else:
            raise AnalyticsInputError(label, [f"[{index}] expected {model.__name__} or mapping, "
                                              f"got {type(item).__name__}"])
    return result


def ensure_thresholds(thresholds: Optional[Union[ThresholdSettings, Mapping]]) -> ThresholdSettings:
    """Resolve the thresholds argument shared by the engine entry points.

    ``None`` means the defaults.  A mapping is validated into
    :class:`ThresholdSettings`, raising :class:`AnalyticsInputError` when
    it cannot be.
    """
    if thresholds is None:
        return DEFAULT_THRESHOLDS
    if isinstance(thresholds, ThresholdSettings):
        return thresholds
    if isinstance(thresholds, Mapping):
        try:
            return ThresholdSettings.model_validate(thresholds)
        except ValidationError as e:
            details = [f"{'.'.join(str(p) for p in err['loc']) or 'thresholds'}: {err['msg']}" for err in e.errors()]
            raise AnalyticsInputError("thresholds", details) from e
    raise AnalyticsInputError("thresholds", [f"expected ThresholdSettings or mapping, "
                                             f"got {type(thresholds).__name__}"])
