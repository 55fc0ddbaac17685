"""Core math package for exponential-lifetime system reliability."""

from .models import AggregateResult, ComponentObservation, Topology
from .validation import (
    EmptyInput,
    InvalidRate,
    InvalidTime,
    InvalidTopology,
    ReliabilityError,
)
from .engine import (
    aggregate,
    compute,
    compute_observations,
    get_prob,
    iter_observations,
)
from .helpers import add_one
from .data import DataFormatError, load_data, make_data, save_data
from .components import ComponentSheetError, load_component_rates
from .config import ConfigError, Settings, load_settings

__all__ = [
    "AggregateResult",
    "ComponentObservation",
    "Topology",
    "ReliabilityError",
    "InvalidTopology",
    "InvalidRate",
    "InvalidTime",
    "EmptyInput",
    "DataFormatError",
    "ComponentSheetError",
    "ConfigError",
    "aggregate",
    "compute",
    "compute_observations",
    "get_prob",
    "iter_observations",
    "add_one",
    "make_data",
    "save_data",
    "load_data",
    "load_component_rates",
    "Settings",
    "load_settings",
]
