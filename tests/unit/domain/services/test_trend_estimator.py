from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from scaleahead.domain.entities.errors import DegenerateInputError, InputFormatError
from scaleahead.domain.entities.observation import Sample
from scaleahead.domain.services.trend_estimator import fit, fit_line, split_window


def test_fit_line_matches_least_squares_reference() -> None:
    seconds = [3.0, 5.0, 3.0, 7.0, 5.0, 8.0, 7.0, 4.0, 6.0, 2.0]
    utilizations = [21.0, 26.0, 20.0, 32.0, 23.0, 42.0, 35.0, 24.0, 30.0, 17.0]

    trend = fit_line(seconds, utilizations)

    assert trend.slope == pytest.approx(3.7, abs=1)
    assert trend.intercept == pytest.approx(8.5, abs=1)
    assert trend.slope == pytest.approx(133 / 36)


def test_fit_line_exact_on_perfect_line() -> None:
    trend = fit_line([0.0, 10.0, 20.0], [5.0, 25.0, 45.0])

    assert trend.slope == pytest.approx(2.0)
    assert trend.intercept == pytest.approx(5.0)


def test_fit_line_rejects_single_timestamp() -> None:
    with pytest.raises(DegenerateInputError):
        fit_line([4.0, 4.0, 4.0], [10.0, 20.0, 30.0])


def test_fit_line_rejects_empty_input() -> None:
    with pytest.raises(DegenerateInputError):
        fit_line([], [])


def test_fit_line_rejects_mismatched_lengths() -> None:
    with pytest.raises(InputFormatError):
        fit_line([1.0, 2.0], [1.0])


def test_fit_on_window_with_shared_timestamp_is_degenerate(now) -> None:
    window = [Sample(timestamp=now, utilization=v) for v in (10, 20, 30)]

    with pytest.raises(DegenerateInputError):
        fit(window)


def test_fit_uses_epoch_seconds(now) -> None:
    window = [
        Sample(timestamp=now - timedelta(seconds=60), utilization=40),
        Sample(timestamp=now - timedelta(seconds=30), utilization=50),
        Sample(timestamp=now, utilization=60),
    ]

    trend = fit(window)

    assert trend.slope == pytest.approx(1 / 3)
    assert trend.value_at(now.timestamp()) == pytest.approx(60.0)


def test_split_window_returns_parallel_sequences() -> None:
    epoch = datetime(1970, 1, 1, tzinfo=timezone.utc)
    window = [
        Sample(timestamp=epoch + timedelta(seconds=30), utilization=50),
        Sample(timestamp=epoch + timedelta(seconds=60), utilization=60),
    ]

    seconds, utilizations = split_window(window)

    assert seconds == [30.0, 60.0]
    assert utilizations == [50.0, 60.0]
