"""Database connection management — engine, sessions and credentials."""

import json

import boto3
from sqlalchemy import Engine, create_engine, text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from core.config import Config
from core.errors import TravelBucketError


class Database:
    def __init__(self, config: Config) -> None:
        self._config = config
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None
        self._secret_cache: dict[str, str] | None = None

    def _get_credentials(self) -> dict[str, str]:
        if self._config.aurora_secret_arn:
            if self._secret_cache is None:
                client = boto3.client("secretsmanager", region_name=self._config.aws_region)
                secret = client.get_secret_value(SecretId=self._config.aurora_secret_arn)
                self._secret_cache = json.loads(secret["SecretString"])
            return self._secret_cache
        return {
            "host": self._config.aurora_host,
            "port": str(self._config.aurora_port),
            "dbname": self._config.aurora_database,
            "user": self._config.aurora_user,
            "password": self._config.aurora_password,
        }

    @property
    def url(self) -> URL:
        if self._config.database_url:
            return make_url(self._config.database_url)
        creds = self._get_credentials()
        return URL.create(
            "postgresql+psycopg",
            username=creds.get("username", creds.get("user", self._config.aurora_user)),
            password=creds.get("password", self._config.aurora_password),
            host=creds.get("host", self._config.aurora_host),
            port=int(creds.get("port", self._config.aurora_port)),
            database=creds.get("dbname", self._config.aurora_database),
        )

    def connect(self) -> None:
        url = self.url
        if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
            # A single shared connection, otherwise each checkout sees an empty database.
            self._engine = create_engine(
                url, connect_args={"check_same_thread": False}, poolclass=StaticPool
            )
        else:
            self._engine = create_engine(url, pool_pre_ping=True)
        self._session_factory = sessionmaker(self._engine, expire_on_commit=False)

    def disconnect(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
        self._engine = None
        self._session_factory = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise TravelBucketError("Database is not connected. Call connect() first.")
        return self._engine

    @property
    def session_factory(self) -> sessionmaker[Session]:
        if self._session_factory is None:
            raise TravelBucketError("Database is not connected. Call connect() first.")
        return self._session_factory

    def health_check(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except Exception:
            return False

    def __enter__(self) -> "Database":
        self.connect()
        return self

    def __exit__(self, *args: object) -> None:
        self.disconnect()
