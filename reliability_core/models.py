"""Domain models for reliability computations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Topology(str, Enum):
    """How component states combine into a system state."""

    SERIES = "series"  # every component must survive
    PARALLEL = "parallel"  # at least one component must survive


@dataclass(frozen=True)
class ComponentObservation:
    """State of one component (rate ``λ``) at one point in time."""

    time: float
    rate: float
    p_fail: float
    p_reliability: float


@dataclass(frozen=True)
class AggregateResult:
    """System-level probability at one distinct point in time."""

    time: float
    probability: float
