from contextlib import AbstractContextManager

from sqlalchemy.orm import Session

from airlog_server.adapters.db.session import get_session_factory


class SqlAlchemyUoW(AbstractContextManager):
    def __init__(self, session: Session | None = None):
        self._external = session is not None
        self._session = session

    @property
    def session(self) -> Session:
        if self._session is None:
            self._session = get_session_factory()()
        return self._session

    def __enter__(self):
        return self

    def __exit__(self, exc_type, *_):
        if self._external or self._session is None:
            return
        if exc_type:
            self._session.rollback()
        else:
            self._session.commit()
        self._session.close()
        self._session = None

    def reading_repo(self):
        from airlog_server.adapters.db.repository import SqlReadingRepository

        return SqlReadingRepository(self.session)
