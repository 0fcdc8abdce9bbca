from .accumulator import FieldAccumulator, PointAccumulator
from .downsampler import SeriesBuilder, downsample
from .median import median
from .windowing import WindowController

__all__ = [
    "FieldAccumulator",
    "PointAccumulator",
    "SeriesBuilder",
    "WindowController",
    "downsample",
    "median",
]
