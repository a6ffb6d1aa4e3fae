from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import unquote, urlparse

import mysql.connector

from ..cloud.model import RemoteConfig
from ..core.exceptions import RemoteConfigError


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_remote_config(cls, config: RemoteConfig) -> "DBConfig":
        if not config.is_valid():
            raise RemoteConfigError("Configuration distante invalide")

        parsed = urlparse(config.url)
        return cls(
            host=parsed.hostname or "localhost",
            port=int(parsed.port or 3306),
            user=unquote(parsed.username or "root"),
            password=config.key,
            database=parsed.path.strip("/"),
        )

    def describe(self) -> str:
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


class DatabaseConnection:
    """Connection factory for one remote configuration.

    Note: We create short-lived connections per operation (safe for simple Flask apps).
    Nothing is cached across configurations.
    """

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    def connect(self):
        return mysql.connector.connect(
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
            database=self._config.database,
        )
