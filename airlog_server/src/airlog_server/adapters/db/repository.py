from typing import List, Optional

from airlog_core.domain.models import LogRow, SensorField
from airlog_core.domain.ports import ReadingRepository
from sqlalchemy import delete, or_, select
from sqlalchemy.orm import Session

from airlog_server.adapters.db.sqlalchemy_models import ReadingLogORM


class SqlReadingRepository(ReadingRepository):
    def __init__(self, session: Session):
        self.session = session

    # READ side
    def get_rows_in_range(
        self,
        device_ids: Optional[List[str]],
        start_ts: float,
        end_ts: float,
    ) -> List[LogRow]:
        stmt = select(ReadingLogORM).where(ReadingLogORM.ts.between(start_ts, end_ts))
        if device_ids is not None:
            if not device_ids:
                return []
            stmt = stmt.where(ReadingLogORM.device_id.in_(device_ids))
        stmt = stmt.order_by(ReadingLogORM.ts.asc(), ReadingLogORM.row_id.asc())
        return [self._to_domain(r) for r in self.session.scalars(stmt).all()]

    # WRITE side
    def insert(self, row: LogRow) -> None:
        orm = ReadingLogORM()
        orm.ts = row.ts
        orm.device_id = row.id
        for sensor in SensorField:
            setattr(orm, sensor.value, row.values.get(sensor))
        self.session.add(orm)

    def delete_device(self, device_id: str) -> None:
        stmt = delete(ReadingLogORM).where(
            or_(
                ReadingLogORM.device_id == device_id,
                ReadingLogORM.device_id.startswith(f"{device_id}/", autoescape=True),
            )
        )
        self.session.execute(stmt)

    # helper
    @staticmethod
    def _to_domain(orm: ReadingLogORM) -> LogRow:
        values = {}
        for sensor in SensorField:
            value = getattr(orm, sensor.value)
            if value is not None:
                values[sensor] = value
        return LogRow(id=orm.device_id, ts=orm.ts, values=values)
