"""
Repository tests against an in-memory SQLite database.
"""

import pytest
from airlog_core.domain.models import LogRow, SensorField
from sqlalchemy import create_engine, select
from sqlalchemy.orm import sessionmaker

from airlog_server.adapters.db.repository import SqlReadingRepository
from airlog_server.adapters.db.sqlalchemy_models import Base, ReadingLogORM
from airlog_server.adapters.db.uow import SqlAlchemyUoW
from airlog_server.utils.factories import LogRowFactory


# ───────── session fixture ─────────
@pytest.fixture()
def session():
    eng = create_engine("sqlite:///:memory:", future=True)
    Base.metadata.create_all(eng)
    sess = sessionmaker(bind=eng, expire_on_commit=False)()
    yield sess
    sess.close()


@pytest.fixture()
def reading_repo(session):
    return SqlReadingRepository(session)


# ───────── Reading repo tests ─────────
def test_insert_round_trips_values(reading_repo, session):
    reading_repo.insert(LogRowFactory(id="d1", ts=10.0, values={SensorField.CO2: 410.0}))
    session.commit()

    rows = reading_repo.get_rows_in_range(["d1"], 0.0, 20.0)
    assert rows == [LogRow(id="d1", ts=10.0, values={SensorField.CO2: 410.0})]


def test_get_rows_in_range_is_inclusive_and_ordered(reading_repo, session):
    for ts in (30.0, 5.0, 20.0, 10.0):
        reading_repo.insert(LogRowFactory(id="d1", ts=ts))
    session.commit()

    rows = reading_repo.get_rows_in_range(["d1"], 10.0, 20.0)
    assert [r.ts for r in rows] == [10.0, 20.0]


def test_get_rows_for_all_devices(reading_repo, session):
    reading_repo.insert(LogRowFactory(id="d1", ts=1.0))
    reading_repo.insert(LogRowFactory(id="d2", ts=2.0))
    session.commit()

    assert [r.id for r in reading_repo.get_rows_in_range(None, 0.0, 10.0)] == ["d1", "d2"]
    assert reading_repo.get_rows_in_range([], 0.0, 10.0) == []


def test_delete_device_removes_channel_rows_only_for_that_device(reading_repo, session):
    for device_id in ("d1", "d1/0", "d1/1", "d10", "d10/0"):
        reading_repo.insert(LogRowFactory(id=device_id, ts=1.0))
    session.commit()

    reading_repo.delete_device("d1")
    session.commit()

    remaining = session.scalars(select(ReadingLogORM.device_id)).all()
    assert sorted(remaining) == ["d10", "d10/0"]


def test_uow_with_external_session_leaves_commit_to_caller(session):
    with SqlAlchemyUoW(session=session) as uow:
        uow.reading_repo().insert(LogRowFactory(id="d1", ts=1.0))
    session.rollback()

    assert session.scalars(select(ReadingLogORM)).all() == []
