import logging

from airlog_core.application.ingest_reading import is_device_id_valid
from airlog_core.domain.errors import InvalidDeviceIdError
from airlog_core.domain.ports import UnitOfWork

log = logging.getLogger(__name__)


def remove_device(device_id: str, uow: UnitOfWork) -> None:
    """Delete every row of *device_id*, channel rows included."""
    if not is_device_id_valid(device_id):
        raise InvalidDeviceIdError(f"Invalid device id: {device_id!r}")
    with uow:
        uow.reading_repo().delete_device(device_id.lower())
    log.info(f"Removed readings for {device_id}")
