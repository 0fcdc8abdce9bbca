from airlog_core.domain.models import ReadingPoint, SensorField
from airlog_core.downsampling.accumulator import FieldAccumulator, PointAccumulator


def test_field_accumulator_skips_nulls():
    acc = FieldAccumulator()
    acc.accumulate(1.0)
    acc.accumulate(None)
    acc.accumulate(3.0)
    assert len(acc) == 2
    assert acc.flush() == 2.0


def test_field_accumulator_clears_after_every_flush():
    acc = FieldAccumulator()
    acc.accumulate(7.0)
    assert acc.flush() == 7.0
    assert len(acc) == 0
    assert acc.flush() is None
    assert len(acc) == 0


def test_point_accumulator_only_tracks_requested_fields():
    acc = PointAccumulator([SensorField.CO2, SensorField.TEMPERATURE])
    acc.accumulate(ReadingPoint(0, {SensorField.CO2: 400.0, SensorField.PM25: 12.0}))
    acc.accumulate(ReadingPoint(1, {SensorField.CO2: 600.0}))

    assert acc.fields == (SensorField.CO2, SensorField.TEMPERATURE)
    assert acc.flush() == {SensorField.CO2: 500.0}
    assert acc.flush() == {}
