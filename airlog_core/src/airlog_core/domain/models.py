from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Optional

from airlog_core.domain.errors import InvalidQueryError


class SensorField(str, Enum):
    """Closed set of sensor fields; values are the wire and column keys."""

    CO2 = "rco2"
    PM1 = "pm01"
    PM25 = "pm02"
    PM10 = "pm10"
    PARTICLE_COUNT = "pCnt"
    TVOC = "tvoc"
    NOX = "nox"
    TEMPERATURE = "atmp"
    HUMIDITY = "rhum"

    @classmethod
    def lookup(cls, name: str) -> Optional["SensorField"]:
        try:
            return cls(name)
        except ValueError:
            return None


ALL_FIELDS = tuple(SensorField)

SensorValues = Dict[SensorField, Optional[float]]


def sensor_values(raw: Mapping[str, Optional[float]]) -> SensorValues:
    """Keep the known, non-null sensor keys of *raw*."""
    values: SensorValues = {}
    for key, value in raw.items():
        sensor = SensorField.lookup(key)
        if sensor is None or value is None:
            continue
        values[sensor] = value
    return values


@dataclass
class ReadingPoint:
    time_ms: float
    values: SensorValues = field(default_factory=dict)

    def get(self, sensor: SensorField) -> Optional[float]:
        return self.values.get(sensor)


@dataclass
class LogRow:
    id: str
    ts: float  # epoch seconds
    values: SensorValues = field(default_factory=dict)


@dataclass
class DeviceReading:
    values: SensorValues = field(default_factory=dict)
    channels: List[SensorValues] = field(default_factory=list)

    def has_data(self) -> bool:
        return bool(self.values) or any(self.channels)


@dataclass
class ReducedSeries:
    time: List[float] = field(default_factory=list)
    fields: Dict[SensorField, List[Optional[float]]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.time)

    def to_dict(self) -> Dict[str, List[Optional[float]]]:
        out: Dict[str, List[Optional[float]]] = {"time": list(self.time)}
        for sensor, column in self.fields.items():
            out[sensor.value] = list(column)
        return out


@dataclass
class DeviceSeries:
    id: str
    series: ReducedSeries
    channel: Optional[int] = None


class ChannelMode(str, Enum):
    NONE = "none"  # plain device ids only
    ONLY = "only"  # composite "device/channel" ids only
    ALL = "all"

    @classmethod
    def parse(cls, text: Optional[str]) -> "ChannelMode":
        if text is None:
            return cls.NONE
        try:
            return cls(text.strip().lower())
        except ValueError:
            raise InvalidQueryError(f"Invalid query mode: {text!r}") from None


@dataclass
class ReadingQuery:
    start_ts: Optional[float] = None
    end_ts: Optional[float] = None
    devices: Optional[List[str]] = None
    sensors: Optional[List[str]] = None
    mode: ChannelMode = ChannelMode.NONE
    points: Optional[int] = None
