import pytest

from airlog_core.application.ingest_reading import ingest_reading, is_device_id_valid
from airlog_core.domain.errors import InvalidDeviceIdError, MissingSensorDataError
from airlog_core.domain.models import DeviceReading, SensorField


class FakeReadingRepo:
    def __init__(self):
        self.insert_calls = []

    def insert(self, row):
        self.insert_calls.append(row)


class StubUoW:
    def __init__(self):
        self.read_repo = FakeReadingRepo()

    def reading_repo(self):
        return self.read_repo

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        pass


@pytest.mark.parametrize("device_id, valid", [("abc", True), ("a b", False), ("a/0", False), ("", False)])
def test_is_device_id_valid(device_id, valid):
    assert is_device_id_valid(device_id) is valid


def test_ingest_single_channel_reading():
    uow = StubUoW()
    ingest_reading("ABC", DeviceReading(values={SensorField.CO2: 420.0}), uow, ts=5.0)

    rows = uow.read_repo.insert_calls
    assert len(rows) == 1
    assert rows[0].id == "abc"
    assert rows[0].ts == 5.0
    assert rows[0].values == {SensorField.CO2: 420.0}


def test_ingest_multi_channel_reading_stores_each_channel():
    uow = StubUoW()
    reading = DeviceReading(
        values={SensorField.PM25: 5.0},
        channels=[{SensorField.PM25: 4.0}, {SensorField.PM25: 6.0}],
    )
    ingest_reading("abc", reading, uow, ts=5.0)

    assert [row.id for row in uow.read_repo.insert_calls] == ["abc", "abc/0", "abc/1"]
    assert uow.read_repo.insert_calls[2].values == {SensorField.PM25: 6.0}


def test_ingest_rejects_invalid_device_id():
    with pytest.raises(InvalidDeviceIdError):
        ingest_reading("a/b", DeviceReading(values={SensorField.CO2: 1.0}), StubUoW())


def test_ingest_rejects_reading_without_data():
    uow = StubUoW()
    with pytest.raises(MissingSensorDataError):
        ingest_reading("abc", DeviceReading(), uow)
    assert uow.read_repo.insert_calls == []
