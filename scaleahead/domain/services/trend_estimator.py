"""
Domain Service - Trend Estimator

Least-squares line through the (seconds, utilization) points of the window:
slope = Cov(t, u) / Var(t) using population moments, and
intercept = mean(u) - slope * mean(t). The whole retained window is used, so
the estimate smooths noise at the cost of some lag.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np
import structlog

from scaleahead.domain.entities.errors import DegenerateInputError, InputFormatError
from scaleahead.domain.entities.observation import Sample
from scaleahead.domain.entities.trend import TrendLine

logger = structlog.get_logger(__name__)


def split_window(samples: Sequence[Sample]) -> Tuple[List[float], List[float]]:
    """Parallel x (epoch seconds) and y (utilization) sequences."""
    seconds = [sample.epoch_seconds for sample in samples]
    utilizations = [float(sample.utilization) for sample in samples]
    return seconds, utilizations


def fit_line(seconds: Sequence[float], utilizations: Sequence[float]) -> TrendLine:
    """
    Fit utilization against time.

    Raises:
        InputFormatError: The sequences differ in length.
        DegenerateInputError: Fewer than two distinct timestamps, so the
            variance of time is zero.
    """
    if len(seconds) != len(utilizations):
        raise InputFormatError(
            "Time and utilization sequences differ in length",
            details={"seconds": len(seconds), "utilizations": len(utilizations)},
        )

    x = np.asarray(seconds, dtype=np.float64)
    y = np.asarray(utilizations, dtype=np.float64)

    if np.unique(x).size < 2:
        raise DegenerateInputError(
            "Cannot fit a trend without two distinct timestamps",
            details={"samples": int(x.size)},
        )

    # Epoch seconds are large; center on the first point before taking moments.
    origin = x[0]
    centered = x - origin

    mean_t = centered.mean()
    mean_u = y.mean()
    variance = np.mean((centered - mean_t) ** 2)
    if variance == 0:
        raise DegenerateInputError(
            "Can't divide by variance if it is 0",
            details={"samples": int(x.size)},
        )
    covariance = np.mean((centered - mean_t) * (y - mean_u))

    slope = float(covariance / variance)
    intercept = float(mean_u - slope * (mean_t + origin))

    logger.debug(
        "trend.fitted", samples=int(x.size), slope=slope, intercept=intercept
    )
    return TrendLine(intercept=intercept, slope=slope)


def fit(samples: Sequence[Sample]) -> TrendLine:
    """Fit the trend line of an observation window."""
    return fit_line(*split_window(samples))
