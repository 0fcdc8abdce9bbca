# airlog_core/application/query_readings.py

import logging
import re
import time
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from airlog_core.config.environments import Settings, get_settings
from airlog_core.domain.errors import InvalidQueryError
from airlog_core.domain.models import (
    ALL_FIELDS,
    ChannelMode,
    DeviceSeries,
    LogRow,
    ReadingPoint,
    ReadingQuery,
    SensorField,
)
from airlog_core.domain.ports import UnitOfWork
from airlog_core.downsampling import downsample

log = logging.getLogger(__name__)

CHANNEL_ID = re.compile(r"^([^/]+)/(\d+)$")


def split_identity(identity: str) -> Tuple[str, Optional[int]]:
    """Split ``"base/3"`` into ``("base", 3)``; anything else has no channel."""
    match = CHANNEL_ID.match(identity)
    if match is None:
        return identity, None
    return match.group(1), int(match.group(2))


def parse_sensor_fields(names: Optional[Sequence[str]]) -> Tuple[SensorField, ...]:
    if names is None:
        return ALL_FIELDS
    selected: List[SensorField] = []
    for name in names:
        for part in name.split(","):
            sensor = SensorField.lookup(part.strip())
            if sensor is not None and sensor not in selected:
                selected.append(sensor)
    if not selected:
        raise InvalidQueryError(f"Found no suitable sensors matching query: {list(names)}")
    return tuple(selected)


def resolve_time_range(
    start_ts: Optional[float],
    end_ts: Optional[float],
    now: float,
    range_hours: float = 24,
) -> Tuple[float, float]:
    span = range_hours * 60 * 60
    if start_ts is None and end_ts is None:
        return now - span, now
    if start_ts is None:
        return end_ts - span, end_ts
    if end_ts is None:
        return start_ts, now
    return start_ts, end_ts


def matches_mode(identity: str, mode: ChannelMode) -> bool:
    is_channel = "/" in identity
    if mode is ChannelMode.NONE:
        return not is_channel
    if mode is ChannelMode.ONLY:
        return is_channel
    return True


def group_rows(
    rows: Iterable[LogRow],
    fields: Sequence[SensorField] = ALL_FIELDS,
    requested_ids: Optional[Sequence[str]] = None,
) -> Dict[str, List[ReadingPoint]]:
    """Group storage rows per identity, keeping the storage order.

    Every requested identity gets an entry, even when no row matched it.
    """
    series_by_id: Dict[str, List[ReadingPoint]] = {}
    for identity in requested_ids or ():
        series_by_id.setdefault(identity, [])

    for row in rows:
        values = {sensor: row.values[sensor] for sensor in fields if row.values.get(sensor) is not None}
        series_by_id.setdefault(row.id, []).append(ReadingPoint(row.ts * 1000, values))
    return series_by_id


def resolve_series(
    rows: Iterable[LogRow],
    num_points: int,
    fields: Sequence[SensorField] = ALL_FIELDS,
    requested_ids: Optional[Sequence[str]] = None,
) -> List[DeviceSeries]:
    result: List[DeviceSeries] = []
    for identity, points in group_rows(rows, fields, requested_ids).items():
        base_id, channel = split_identity(identity)
        result.append(
            DeviceSeries(id=base_id, channel=channel, series=downsample(points, num_points, fields))
        )
    return result


def get_readings(
    query: ReadingQuery,
    uow: UnitOfWork,
    settings: Optional[Settings] = None,
) -> List[DeviceSeries]:
    settings = settings or get_settings()
    fields = parse_sensor_fields(query.sensors)
    num_points = query.points if query.points is not None else settings.DEFAULT_POINTS
    start_ts, end_ts = resolve_time_range(
        query.start_ts, query.end_ts, now=time.time(), range_hours=settings.DEFAULT_RANGE_HOURS
    )

    with uow:
        rows = uow.reading_repo().get_rows_in_range(
            device_ids=query.devices,
            start_ts=start_ts,
            end_ts=end_ts,
        )

    if query.devices is None:
        rows = [row for row in rows if matches_mode(row.id, query.mode)]

    log.debug(f"Resolving {len(rows)} rows between {start_ts} and {end_ts} into {num_points} points")
    return resolve_series(rows, num_points, fields, requested_ids=query.devices)
