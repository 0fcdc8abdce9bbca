"""
Reduce a reading series to a bounded number of points.

The caller owns ordering: ``series`` must already be sorted by ``time_ms``
(equal timestamps are fine). Unsorted input does not raise but the output
order is then undefined.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from airlog_core.domain.models import ALL_FIELDS, ReadingPoint, ReducedSeries, SensorField
from airlog_core.downsampling.accumulator import PointAccumulator
from airlog_core.downsampling.windowing import WindowController

log = logging.getLogger(__name__)


class SeriesBuilder:
    """Columnar output buffer; every column stays the same length as ``time``."""

    def __init__(self, fields: Iterable[SensorField]):
        self._time: List[float] = []
        self._columns: Dict[SensorField, List[Optional[float]]] = {
            sensor: [] for sensor in fields
        }

    def __len__(self) -> int:
        return len(self._time)

    def append(self, time_ms: float, values: Mapping[SensorField, Optional[float]]) -> None:
        self._time.append(time_ms)
        for sensor, column in self._columns.items():
            column.append(values.get(sensor))

    def emit(self, time_ms: float, medians: Mapping[SensorField, Optional[float]]) -> bool:
        """Append a flushed window unless it carries no values at all."""
        if not medians:
            return False
        self.append(time_ms, medians)
        return True

    def build(self) -> ReducedSeries:
        # fields without a single value anywhere are dropped, not null-filled
        columns = {
            sensor: column
            for sensor, column in self._columns.items()
            if any(value is not None for value in column)
        }
        return ReducedSeries(time=self._time, fields=columns)


def _passthrough(series: Sequence[ReadingPoint], builder: SeriesBuilder) -> ReducedSeries:
    for point in series:
        builder.append(point.time_ms, point.values)
    return builder.build()


def _copy_tail(
    tail: Sequence[ReadingPoint],
    builder: SeriesBuilder,
    accumulator: PointAccumulator,
    windows: WindowController,
) -> ReducedSeries:
    """Flush the open window, then copy the remaining raw points verbatim."""
    builder.emit(windows.tail_stamp(tail[0].time_ms), accumulator.flush())
    for point in tail:
        builder.append(point.time_ms, point.values)
    return builder.build()


def downsample(
    series: Sequence[ReadingPoint],
    num_points: int,
    fields: Iterable[SensorField] = ALL_FIELDS,
) -> ReducedSeries:
    """Reduce *series* to at most *num_points* points of windowed medians.

    A non-positive ``num_points`` is a caller error and raises ValueError.
    """
    if num_points <= 0:
        raise ValueError(f"num_points must be positive, got {num_points}")

    fields = tuple(fields)
    builder = SeriesBuilder(fields)
    total = len(series)
    if total <= num_points:
        return _passthrough(series, builder)

    accumulator = PointAccumulator(fields)
    windows = WindowController(series[0].time_ms, series[-1].time_ms, num_points)

    for index, point in enumerate(series):
        flushed = None
        if windows.crossed(point.time_ms) and num_points - len(builder) > 1:
            flushed = builder.emit(windows.advance(), accumulator.flush())

        remaining = num_points - len(builder)
        if remaining > total - index:
            reduced = _copy_tail(series[index:], builder, accumulator, windows)
            log.debug(f"Reduced {total} points to {len(reduced)} (tail copied from {index})")
            return reduced

        if windows.crossed(point.time_ms) or flushed is False:
            windows.re_estimate(point.time_ms, remaining)

        accumulator.accumulate(point)

    builder.emit(windows.end_ms, accumulator.flush())
    reduced = builder.build()
    log.debug(f"Reduced {total} points to {len(reduced)}")
    return reduced
