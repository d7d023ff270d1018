"""Bollinger Bands over an OHLCV series.

basis = SMA(length), upper/lower = basis +/- multiplier * population stdev.
The output is positional: one :class:`BandPoint` per input bar.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

import structlog

from bandchart.errors import InvalidConfiguration, UnknownSource
from bandchart.models import OHLCV, BandPoint, BollingerInputs, Source

log = structlog.get_logger("bandchart.indicators")

SOURCE_SELECTORS: dict[Source, Callable[[OHLCV], float]] = {
    Source.CLOSE: lambda bar: bar.close,
}


def select_source(source: Source) -> Callable[[OHLCV], float]:
    """Return the field accessor for *source*."""
    try:
        return SOURCE_SELECTORS[source]
    except KeyError:
        raise UnknownSource(f"No selector registered for source {source!r}") from None


def compute_bollinger_bands(
    series: Sequence[OHLCV],
    inputs: BollingerInputs,
) -> list[BandPoint]:
    """Compute Bollinger Bands for every bar of *series*.

    Points before the first complete window have ``None`` fields. A non-zero
    ``inputs.offset`` moves the point computed at bar ``i`` to bar
    ``i + offset``, re-stamped with that bar's time; positions nothing maps
    onto are left undefined.

    Raises:
        InvalidConfiguration: ``inputs.length`` is below 1.
        UnknownSource: ``inputs.source`` has no registered selector.
    """
    length = inputs.length
    if length < 1:
        raise InvalidConfiguration(f"length must be >= 1, got {length}")
    get_value = select_source(inputs.source)

    n = len(series)
    values = [get_value(bar) for bar in series]
    result: list[BandPoint] = []

    rolling_sum = 0.0
    for i in range(n):
        rolling_sum += values[i]
        if i >= length:
            rolling_sum -= values[i - length]

        if i + 1 < length:
            result.append(BandPoint(time=series[i].time))
            continue

        mean = rolling_sum / length
        variance_sum = 0.0
        for j in range(i + 1 - length, i + 1):
            diff = values[j] - mean
            variance_sum += diff * diff
        std_dev = math.sqrt(variance_sum / length)
        result.append(
            BandPoint(
                time=series[i].time,
                basis=mean,
                upper=mean + inputs.multiplier * std_dev,
                lower=mean - inputs.multiplier * std_dev,
            )
        )

    if inputs.offset != 0:
        result = _shift(result, series, inputs.offset)

    log.debug(
        "bollinger_computed",
        bars=n,
        length=length,
        multiplier=inputs.multiplier,
        offset=inputs.offset,
        defined=sum(1 for p in result if p.is_defined),
    )
    return result


def _shift(points: list[BandPoint], series: Sequence[OHLCV], offset: int) -> list[BandPoint]:
    n = len(series)
    shifted: list[BandPoint] = []
    for target in range(n):
        src = target - offset
        if 0 <= src < n:
            shifted.append(points[src].model_copy(update={"time": series[target].time}))
        else:
            shifted.append(BandPoint(time=series[target].time))
    return shifted
