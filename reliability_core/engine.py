"""Pure math routines for system reliability under exponential lifetimes."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Sequence, Union

import numpy as np
import pandas as pd

from .models import AggregateResult, ComponentObservation, Topology
from .validation import parse_topology, validate_rates, validate_times

logger = logging.getLogger(__name__)

Number = Union[int, float]

DEFAULT_TIME = 100.0


def compute_observations(
    times: Union[Number, Iterable[Number]],
    rates: Union[Number, Iterable[Number]],
) -> pd.DataFrame:
    """Return one row per ``(t, λ)`` pair with failure and reliability probabilities.

    Duplicate time points are collapsed and rows come out sorted by ``t``, so
    every distinct time is evaluated exactly once against every component.
    Component order within a time point follows ``rates``.
    """

    t_values = np.unique(np.asarray(validate_times(times), dtype=float))
    lam_values = np.asarray(validate_rates(rates), dtype=float)

    grid = pd.MultiIndex.from_product([t_values, lam_values], names=["t", "lambda"])
    observations = grid.to_frame(index=False)

    p_fail = 1.0 - np.exp(-observations["lambda"] * observations["t"])
    observations["p_fail"] = p_fail
    observations["p_reliability"] = 1.0 - p_fail

    logger.debug(
        "Expanded %d time point(s) x %d rate(s) into %d observations",
        len(t_values),
        len(lam_values),
        len(observations),
    )
    return observations


def aggregate(observations: pd.DataFrame, topology: Union[Topology, str]) -> pd.DataFrame:
    """Fold ``observations`` into one system probability per distinct ``t``."""

    topology = parse_topology(topology)
    grouped = observations.groupby("t", sort=True)

    if topology is Topology.SERIES:
        prob = grouped["p_reliability"].prod()
    else:
        prob = 1.0 - grouped["p_fail"].prod()

    return prob.rename("prob").reset_index()


def get_prob(
    t: Union[Number, Sequence[Number]] = DEFAULT_TIME,
    lambdas: Union[Number, Sequence[Number], None] = None,
    type: Union[Topology, str] = Topology.SERIES,
) -> pd.DataFrame:
    """Return system reliability for each distinct time point.

    Parameters
    ----------
    t:
        Time point(s) to evaluate. Non-negative; duplicates and any order are
        accepted. Defaults to ``100``.
    lambdas:
        Failure rate of every component (exponential rate parameter), all
        strictly positive. Required.
    type:
        ``"series"`` (system survives only while every component survives) or
        ``"parallel"`` (system survives while at least one component survives).

    Returns
    -------
    pandas.DataFrame
        Columns ``t`` and ``prob``, one row per distinct ``t`` in ascending order.
    """

    # Checked first so an unknown topology never triggers any computation.
    topology = parse_topology(type)
    if lambdas is None:
        raise TypeError("get_prob() requires the 'lambdas' argument.")

    observations = compute_observations(t, lambdas)
    result = aggregate(observations, topology)
    logger.debug("Computed %s reliability for %d time point(s)", topology.value, len(result))
    return result


def compute(
    times: Union[Number, Iterable[Number]],
    rates: Union[Number, Iterable[Number]],
    topology: Union[Topology, str],
) -> List[AggregateResult]:
    """Typed variant of :func:`get_prob` returning :class:`AggregateResult` records."""

    table = get_prob(times, rates, topology)
    return [
        AggregateResult(time=float(row.t), probability=float(row.prob))
        for row in table.itertuples(index=False)
    ]


def iter_observations(
    times: Union[Number, Iterable[Number]],
    rates: Union[Number, Iterable[Number]],
) -> Iterator[ComponentObservation]:
    """Yield the materialized cross product as :class:`ComponentObservation` records."""

    for row in compute_observations(times, rates).itertuples(index=False):
        yield ComponentObservation(
            time=float(row.t),
            rate=float(row[1]),
            p_fail=float(row.p_fail),
            p_reliability=float(row.p_reliability),
        )
