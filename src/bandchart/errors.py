"""Domain errors."""


class BandChartError(Exception):
    """Base class for all bandchart errors."""


class InvalidConfiguration(BandChartError, ValueError):
    """Indicator settings that cannot be computed (e.g. ``length < 1``)."""


class UnknownSource(InvalidConfiguration):
    """A source field outside the supported set."""


class SeriesError(BandChartError, ValueError):
    """Malformed OHLCV input: unordered or duplicate timestamps."""
