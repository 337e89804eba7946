"""Domain Service - Predictor."""


def predict(
    boot_latency_seconds: float, now_seconds: float, intercept: float, slope: float
) -> float:
    """
    Utilization the trend line projects for when a new instance would be ready.

    The result is not clamped; it may be negative or above 100.
    """
    return intercept + slope * (now_seconds + boot_latency_seconds)
