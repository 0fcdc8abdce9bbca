from typing import List, Optional, Protocol

from airlog_core.domain.models import LogRow


class ReadingRepository(Protocol):
    def get_rows_in_range(
        self,
        device_ids: Optional[List[str]],
        start_ts: float,
        end_ts: float,
    ) -> List[LogRow]: ...

    def insert(self, row: LogRow) -> None: ...

    def delete_device(self, device_id: str) -> None: ...


class UnitOfWork(Protocol):
    def reading_repo(self) -> ReadingRepository: ...

    def __enter__(self) -> "UnitOfWork": ...

    def __exit__(self, exc_type, exc_val, exc_tb) -> None: ...
