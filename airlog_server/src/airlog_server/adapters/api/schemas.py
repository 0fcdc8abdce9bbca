# airlog_server/adapters/api/schemas.py

from typing import Dict, List, Optional

from airlog_core.domain.models import DeviceReading, DeviceSeries, sensor_values
from pydantic import BaseModel, Field


class SensorValuesIn(BaseModel):
    rco2: Optional[float] = Field(None, description="CO2 concentration (ppm)")
    pm01: Optional[float] = None
    pm02: Optional[float] = Field(None, description="PM2.5 (µg/m³)")
    pm10: Optional[float] = None
    pCnt: Optional[float] = Field(None, description="Particle count")
    tvoc: Optional[float] = None
    nox: Optional[float] = None
    atmp: Optional[float] = Field(None, description="Temperature (°C)")
    rhum: Optional[float] = Field(None, description="Relative humidity (%)")

    def to_values(self):
        return sensor_values(self.model_dump(exclude={"channels"}))


class DeviceReadingIn(SensorValuesIn):
    ts: Optional[float] = Field(None, description="Epoch seconds; defaults to arrival time")
    channels: Optional[List[SensorValuesIn]] = None

    def to_domain(self) -> DeviceReading:
        return DeviceReading(
            values=self.to_values(),
            channels=[channel.to_values() for channel in self.channels or []],
        )


class DeviceSeriesOut(BaseModel):
    id: str
    channel: Optional[int] = None
    series: Dict[str, List[Optional[float]]]

    @classmethod
    def from_domain(cls, device_series: DeviceSeries) -> "DeviceSeriesOut":
        fields = {"id": device_series.id, "series": device_series.series.to_dict()}
        if device_series.channel is not None:
            fields["channel"] = device_series.channel
        return cls(**fields)
