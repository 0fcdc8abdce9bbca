import logging
import re
import time
from typing import Optional

from airlog_core.domain.errors import InvalidDeviceIdError, MissingSensorDataError
from airlog_core.domain.models import DeviceReading, LogRow
from airlog_core.domain.ports import UnitOfWork

log = logging.getLogger(__name__)

_INVALID_ID_CHARS = re.compile(r"[\s/]")


def is_device_id_valid(device_id: str) -> bool:
    return bool(device_id) and not _INVALID_ID_CHARS.search(device_id)


def ingest_reading(
    device_id: str,
    reading: DeviceReading,
    uow: UnitOfWork,
    ts: Optional[float] = None,
) -> None:
    """Store a device reading; multi-channel readings also get one row per channel."""
    if not is_device_id_valid(device_id):
        raise InvalidDeviceIdError(f"Invalid device id: {device_id!r}")
    if not reading.has_data():
        raise MissingSensorDataError("Missing air quality data")

    device_id = device_id.lower()
    ts = ts if ts is not None else time.time()
    with uow:
        repo = uow.reading_repo()
        repo.insert(LogRow(id=device_id, ts=ts, values=dict(reading.values)))
        if len(reading.channels) > 1:
            for index, channel in enumerate(reading.channels):
                repo.insert(LogRow(id=f"{device_id}/{index}", ts=ts, values=dict(channel)))
    log.info(f"Stored reading for {device_id} ({len(reading.channels)} channels)")
