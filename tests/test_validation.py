import numpy as np
import pandas as pd
import pytest

from reliability_core.engine import get_prob
from reliability_core.models import Topology
from reliability_core.validation import (
    EmptyInput,
    InvalidRate,
    InvalidTime,
    InvalidTopology,
    ReliabilityError,
    parse_topology,
    validate_rates,
    validate_times,
)


@pytest.mark.parametrize(
    "raw, expected",
    [("series", Topology.SERIES), ("parallel", Topology.PARALLEL), (Topology.PARALLEL, Topology.PARALLEL)],
)
def test_parse_topology_accepts_known_values(raw: object, expected: Topology) -> None:
    assert parse_topology(raw) is expected


def test_parse_topology_message_names_value() -> None:
    with pytest.raises(InvalidTopology, match="'mesh'"):
        parse_topology("mesh")


def test_errors_share_a_value_error_base() -> None:
    for error in (InvalidTopology, InvalidRate, InvalidTime, EmptyInput):
        assert issubclass(error, ReliabilityError)
        assert issubclass(error, ValueError)


def test_validate_accepts_numpy_and_pandas_inputs() -> None:
    assert validate_times(np.array([0, 1, 2])) == [0.0, 1.0, 2.0]
    assert validate_rates(pd.Series([0.5, 1e-6])) == [0.5, 1e-6]


def test_validate_times_allows_zero_and_duplicates() -> None:
    assert validate_times([0, 5, 0]) == [0.0, 5.0, 0.0]


def test_validate_rates_rejects_string_sequence() -> None:
    with pytest.raises(InvalidRate):
        validate_rates("0.1")


def test_validate_rates_rejects_booleans() -> None:
    with pytest.raises(InvalidRate):
        validate_rates([True])


def test_validate_times_rejects_empty_generator() -> None:
    with pytest.raises(EmptyInput):
        validate_times(t for t in [])


def test_zero_dimensional_arrays_are_scalars() -> None:
    assert validate_times(np.array(5.0)) == [5.0]
    assert validate_rates(np.array(0.1)) == [0.1]


def test_zero_dimensional_array_in_get_prob() -> None:
    table = get_prob(np.array(5.0), [0.1], "series")

    assert table["t"].tolist() == [5.0]
    assert table["prob"].iloc[0] == pytest.approx(np.exp(-0.5))
