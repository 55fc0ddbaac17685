"""Boundary checks that turn raw caller input into runtime-ready values."""

from __future__ import annotations

import math
from typing import Any, Iterable, List, Type, Union

import numpy as np

from .models import Topology

Number = Union[int, float]


class ReliabilityError(ValueError):
    """Base class for every error raised by ``reliability_core``."""


class InvalidTopology(ReliabilityError):
    """Raised when the topology is neither ``series`` nor ``parallel``."""


class InvalidRate(ReliabilityError):
    """Raised when a failure rate is not a positive, finite number."""


class InvalidTime(ReliabilityError):
    """Raised when a time point is not a non-negative, finite number."""


class EmptyInput(ReliabilityError):
    """Raised when no time points or no failure rates are supplied."""


def parse_topology(value: Union[Topology, str]) -> Topology:
    """Return the :class:`Topology` matching ``value``.

    Only the exact values ``"series"`` and ``"parallel"`` (or the enum members
    themselves) are accepted.
    """

    if isinstance(value, Topology):
        return value
    try:
        return Topology(value)
    except ValueError:
        raise InvalidTopology(
            f"Unsupported topology: {value!r} (expected 'series' or 'parallel')."
        ) from None


def validate_times(times: Union[Number, Iterable[Number]]) -> List[float]:
    """Return ``times`` as a list of floats, rejecting negative or non-finite values."""

    values = _as_float_list(times, "time", InvalidTime)
    if not values:
        raise EmptyInput("At least one time point is required.")
    for value in values:
        if not math.isfinite(value) or value < 0:
            raise InvalidTime(f"Time points must be non-negative and finite, got {value}.")
    return values


def validate_rates(rates: Union[Number, Iterable[Number]]) -> List[float]:
    """Return ``rates`` as a list of floats, rejecting non-positive or non-finite values."""

    values = _as_float_list(rates, "failure rate", InvalidRate)
    if not values:
        raise EmptyInput("At least one failure rate is required.")
    for value in values:
        if not math.isfinite(value) or value <= 0:
            raise InvalidRate(f"Failure rates must be positive and finite, got {value}.")
    return values


def _as_float_list(raw: Any, label: str, error: Type[ReliabilityError]) -> List[float]:
    if isinstance(raw, (str, bytes)):
        raise error(f"Invalid numeric value for {label}: {raw!r}.")
    if isinstance(raw, np.ndarray) and raw.ndim == 0:
        raw = [raw.item()]
    if not isinstance(raw, Iterable):
        raw = [raw]
    values = []
    for item in raw:
        if isinstance(item, (str, bytes, bool)) or item is None:
            raise error(f"Invalid numeric value for {label}: {item!r}.")
        try:
            values.append(float(item))
        except (TypeError, ValueError):
            raise error(f"Invalid numeric value for {label}: {item!r}.")
    return values
