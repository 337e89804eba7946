"""
Duration text format used for cached boot latencies.

The grammar is the one the legacy controller wrote into instance metadata:
a sequence of decimal numbers with unit suffixes such as ``"300ms"``,
``"1.5s"`` or ``"2h45m0s"``.
"""

import re

from scaleahead.domain.entities.errors import DurationParseError

_NANOS_PER_UNIT = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,
    "μs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_COMPONENT = r"(\d+\.?\d*|\.\d+)(ns|us|µs|μs|ms|s|m|h)"
_DURATION_RE = re.compile(rf"([-+]?)((?:{_COMPONENT})+)")
_COMPONENT_RE = re.compile(_COMPONENT)


def parse_duration(text: str) -> float:
    """
    Parse duration text into seconds.

    Raises:
        DurationParseError: If ``text`` is not a valid duration.
    """
    if not isinstance(text, str):
        raise DurationParseError(repr(text))

    stripped = text.strip()
    if stripped in ("0", "+0", "-0"):
        return 0.0

    match = _DURATION_RE.fullmatch(stripped)
    if match is None:
        raise DurationParseError(text)

    sign, body = match.group(1), match.group(2)
    nanos = 0.0
    for number, unit in _COMPONENT_RE.findall(body):
        nanos += float(number) * _NANOS_PER_UNIT[unit]

    seconds = nanos / 1e9
    return -seconds if sign == "-" else seconds


def _format_fraction(whole: int, fraction: int, digits: int) -> str:
    text = str(whole)
    fraction_text = f"{fraction:0{digits}d}".rstrip("0")
    if fraction_text:
        text += "." + fraction_text
    return text


def format_duration(seconds: float) -> str:
    """Render seconds as duration text, e.g. ``90.5`` -> ``"1m30.5s"``."""
    nanos = round(seconds * 1e9)
    if nanos == 0:
        return "0s"

    sign = "-" if nanos < 0 else ""
    nanos = abs(nanos)

    if nanos < 1_000:
        return f"{sign}{nanos}ns"
    if nanos < 1_000_000:
        return f"{sign}{_format_fraction(nanos // 1_000, nanos % 1_000, 3)}µs"
    if nanos < 1_000_000_000:
        return (
            f"{sign}{_format_fraction(nanos // 1_000_000, nanos % 1_000_000, 6)}ms"
        )

    hours, remainder = divmod(nanos, _NANOS_PER_UNIT["h"])
    minutes, remainder = divmod(remainder, _NANOS_PER_UNIT["m"])
    whole_seconds, fraction = divmod(remainder, _NANOS_PER_UNIT["s"])

    text = f"{_format_fraction(whole_seconds, fraction, 9)}s"
    if hours or minutes:
        text = f"{minutes}m{text}"
    if hours:
        text = f"{hours}h{text}"
    return sign + text
