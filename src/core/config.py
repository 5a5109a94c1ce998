from os import environ

from pydantic import BaseModel, ConfigDict


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    aurora_host: str
    aurora_port: int
    aurora_database: str
    aurora_user: str
    aurora_password: str
    aurora_secret_arn: str | None = None
    database_url: str | None = None
    place_backend: str = "sql"
    alembic_config: str = "/var/task/alembic.ini"
    log_level: str = "INFO"
    environment: str


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config — for testing only."""
    global _cached_config
    _cached_config = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        aurora_host=environ.get("AURORA_HOST", "localhost"),
        aurora_port=int(environ.get("AURORA_PORT", "5432")),
        aurora_database=environ.get("AURORA_DATABASE", "travelbucket"),
        aurora_user=environ.get("AURORA_USER", "travelbucket"),
        aurora_password=environ.get("AURORA_PASSWORD", "localdev"),
        aurora_secret_arn=environ.get("AURORA_SECRET_ARN") or None,
        database_url=environ.get("DATABASE_URL") or None,
        place_backend=environ.get("PLACE_BACKEND", "sql"),
        alembic_config=environ.get("ALEMBIC_CONFIG", "/var/task/alembic.ini"),
        log_level=environ.get("LOG_LEVEL", "INFO"),
        environment=environ.get("ENVIRONMENT", "local"),
    )
    return _cached_config
