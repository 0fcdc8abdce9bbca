import pytest

from airlog_core.application.delete_data import remove_device
from airlog_core.domain.errors import InvalidDeviceIdError


class FakeRepo:
    def __init__(self):
        self.calls = []

    def delete_device(self, device_id):
        self.calls.append(device_id)


class StubUoW:
    def __init__(self):
        self.read_repo = FakeRepo()

    def reading_repo(self):
        return self.read_repo

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        pass


def test_remove_device_invokes_repo():
    uow = StubUoW()
    remove_device("Fake", uow)
    assert uow.read_repo.calls == ["fake"]


def test_remove_device_rejects_channel_ids():
    uow = StubUoW()
    with pytest.raises(InvalidDeviceIdError):
        remove_device("fake/0", uow)
    assert uow.read_repo.calls == []
