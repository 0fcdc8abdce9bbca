from datetime import datetime, timezone

import factory
from airlog_core.domain.models import LogRow, SensorField


class UTCFloatTimestamp(factory.Factory):
    class Meta:
        model = float

    @classmethod
    def _create(cls, *_, **__):
        return datetime.now(tz=timezone.utc).timestamp()


class LogRowFactory(factory.Factory):
    class Meta:
        model = LogRow

    id = factory.Sequence(lambda n: f"sensor-{n}")
    ts = UTCFloatTimestamp()
    values = factory.LazyFunction(
        lambda: {SensorField.PM1: 1.0, SensorField.PM25: 2.0, SensorField.PM10: 3.0}
    )
