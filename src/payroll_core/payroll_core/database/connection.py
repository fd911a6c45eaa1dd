from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Optional

import mysql.connector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    connection_timeout: int = 10

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        """Build from a settings module's ``DB_CONFIG`` (env values arrive as strings)."""

        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "payroll_db")),
            connection_timeout=int(db_config.get("connection_timeout", 10)),
        )

    def connect_kwargs(self) -> dict[str, Any]:
        return asdict(self)


class DatabaseConnection:
    """Process-wide connection factory for the payroll database.

    Every repository call opens its own short-lived connection; nothing is pooled.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    @property
    def config(self) -> DBConfig:
        return self._config

    def connect(self):
        logger.debug(
            "Connecting to %s@%s:%s/%s",
            self._config.user, self._config.host, self._config.port, self._config.database,
        )
        return mysql.connector.connect(**self._config.connect_kwargs())
