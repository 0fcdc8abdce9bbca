from .delete_data import remove_device
from .ingest_reading import ingest_reading
from .query_readings import get_readings, resolve_series

__all__ = [
    "remove_device",
    "ingest_reading",
    "get_readings",
    "resolve_series",
]
