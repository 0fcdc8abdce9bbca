__all__ = ["ReadingLogORM"]

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from airlog_server.adapters.db.session import Base


class ReadingLogORM(Base):
    """One stored reading; sensor columns are named after SensorField values."""

    __tablename__ = "air_quality_log"

    row_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    ts: Mapped[float] = mapped_column(Float, index=True, nullable=False)
    device_id: Mapped[str] = mapped_column(String, index=True, nullable=False)
    rco2: Mapped[float | None] = mapped_column(Float, nullable=True)
    pm01: Mapped[float | None] = mapped_column(Float, nullable=True)
    pm02: Mapped[float | None] = mapped_column(Float, nullable=True)
    pm10: Mapped[float | None] = mapped_column(Float, nullable=True)
    pCnt: Mapped[float | None] = mapped_column(Float, nullable=True)
    tvoc: Mapped[float | None] = mapped_column(Float, nullable=True)
    nox: Mapped[float | None] = mapped_column(Float, nullable=True)
    atmp: Mapped[float | None] = mapped_column(Float, nullable=True)
    rhum: Mapped[float | None] = mapped_column(Float, nullable=True)
