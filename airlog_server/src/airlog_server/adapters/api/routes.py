# airlog_server/adapters/api/routes.py

from datetime import datetime, timezone
from typing import List, Optional

from airlog_core.application.delete_data import remove_device
from airlog_core.application.ingest_reading import ingest_reading
from airlog_core.application.query_readings import get_readings
from airlog_core.domain.errors import (
    InvalidDeviceIdError,
    InvalidQueryError,
    MissingSensorDataError,
)
from airlog_core.domain.models import ChannelMode, ReadingQuery
from fastapi import APIRouter, Depends, HTTPException, Query

from airlog_server.adapters.api.schemas import DeviceReadingIn, DeviceSeriesOut
from airlog_server.adapters.db.uow import SqlAlchemyUoW

router = APIRouter()


def get_uow():
    with SqlAlchemyUoW() as uow:
        yield uow


def _to_ts(value: Optional[datetime]) -> Optional[float]:
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.timestamp()


@router.get("/ping")
def ping():
    return {"status": "ok"}


@router.get(
    "/api/query",
    response_model=list[DeviceSeriesOut],
    response_model_exclude_unset=True,
)
def query(
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    device: Optional[List[str]] = Query(None),
    sensor: Optional[List[str]] = Query(None),
    mode: Optional[str] = None,
    points: Optional[int] = Query(None, gt=0),
    uow: SqlAlchemyUoW = Depends(get_uow),
):
    try:
        reading_query = ReadingQuery(
            start_ts=_to_ts(start),
            end_ts=_to_ts(end),
            devices=device,
            sensors=sensor,
            mode=ChannelMode.parse(mode),
            points=points,
        )
        results = get_readings(reading_query, uow)
    except InvalidQueryError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return [DeviceSeriesOut.from_domain(r) for r in results]


@router.post("/api/restricted/submit/{device}")
def submit(
    device: str,
    reading_in: DeviceReadingIn,
    uow: SqlAlchemyUoW = Depends(get_uow),
):
    try:
        ingest_reading(device, reading_in.to_domain(), uow, ts=reading_in.ts)
    except (InvalidDeviceIdError, MissingSensorDataError) as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return {"status": "ok"}


@router.delete("/api/restricted/delete/{device}")
def delete_device(device: str, uow: SqlAlchemyUoW = Depends(get_uow)):
    try:
        remove_device(device, uow)
    except InvalidDeviceIdError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return {"status": "ok"}
