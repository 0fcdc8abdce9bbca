from typing import Dict, Iterable, List, Optional, Tuple

from airlog_core.domain.models import ReadingPoint, SensorField, SensorValues
from airlog_core.downsampling.median import median


class FieldAccumulator:
    """Buffers the raw values of one sensor field between flushes."""

    def __init__(self) -> None:
        self._values: List[float] = []

    def __len__(self) -> int:
        return len(self._values)

    def accumulate(self, value: Optional[float]) -> None:
        if value is not None:
            self._values.append(value)

    def flush(self) -> Optional[float]:
        """Median of everything accumulated since the last flush; always clears."""
        result = median(self._values)
        self._values = []
        return result


class PointAccumulator:
    """One FieldAccumulator per tracked field, built fresh for every downsample call."""

    def __init__(self, fields: Iterable[SensorField]):
        self._accumulators: Dict[SensorField, FieldAccumulator] = {
            sensor: FieldAccumulator() for sensor in fields
        }

    @property
    def fields(self) -> Tuple[SensorField, ...]:
        return tuple(self._accumulators)

    def accumulate(self, point: ReadingPoint) -> None:
        for sensor, accumulator in self._accumulators.items():
            accumulator.accumulate(point.get(sensor))

    def flush(self) -> SensorValues:
        medians: SensorValues = {}
        for sensor, accumulator in self._accumulators.items():
            value = accumulator.flush()
            if value is not None:
                medians[sensor] = value
        return medians
