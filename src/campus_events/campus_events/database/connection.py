from __future__ import annotations

import logging
from dataclasses import dataclass

import mysql.connector

from ..core.exceptions import StoreError

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "campus_events")),
        )

    def describe(self) -> str:
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


class DatabaseConnection:
    """Explicit store handle shared by all repositories.

    ``open()`` at startup checks the database is reachable, ``close()`` at shutdown
    stops handing out connections. In between we create short-lived connections
    per operation (safe for simple Flask apps).
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._open = False

    @property
    def config(self) -> DBConfig:
        return self._config

    @property
    def is_open(self) -> bool:
        return self._open

    def open(self) -> "DatabaseConnection":
        conn = self._raw_connect()
        conn.close()
        self._open = True
        logger.info("Database connected: %s", self._config.describe())
        return self

    def close(self) -> None:
        if self._open:
            logger.info("Database handle closed: %s", self._config.describe())
        self._open = False

    def connect(self):
        if not self._open:
            raise StoreError("Database connection is not open")
        return self._raw_connect()

    def _raw_connect(self):
        try:
            return mysql.connector.connect(
                host=self._config.host,
                port=int(self._config.port),
                user=self._config.user,
                password=self._config.password,
                database=self._config.database,
            )
        except mysql.connector.Error as exc:
            raise StoreError(f"Cannot connect to database {self._config.describe()}: {exc}") from exc
