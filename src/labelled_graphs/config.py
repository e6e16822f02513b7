import logging
from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .backends import BACKENDS


class ConfigError(RuntimeError):
    """Configuration-related error."""
    pass


# ─────────────────────────────────────────────────────────────
# Section configs
# ─────────────────────────────────────────────────────────────


class LoggingSettings(BaseModel):
    level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "WARNING"
    format: str = "%(asctime)-20s %(name)-40s %(levelname)-8s: %(message)s"


class BackendSettings(BaseModel):
    """
    Backing graph classes used when a LabelledGraph is built from labels only.

    Override via env vars, e.g. LABELLED_GRAPHS_BACKENDS__UNDIRECTED=MetaGraph.
    """

    undirected: str = Field(
        "SimpleGraph",
        description="Backend for LabelledGraph(labels). Must be undirected.",
    )
    directed: str = Field(
        "SimpleDiGraph",
        description="Backend for LabelledDiGraph(labels). Must be directed.",
    )


# ─────────────────────────────────────────────────────────────
# Top-level settings
# ─────────────────────────────────────────────────────────────


class AppSettings(BaseSettings):
    """
    Library configuration.

    Precedence (highest → lowest):

    1. Init kwargs (tests/overrides)
    2. Environment variables
    3. .env and .env.local
    4. Defaults in this class
    """

    model_config = SettingsConfigDict(
        env_prefix="LABELLED_GRAPHS_",  # LABELLED_GRAPHS_LOGGING__LEVEL, ...
        env_file=(".env", ".env.local"),  # .env.local overrides .env
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    logging: LoggingSettings = LoggingSettings()
    backends: BackendSettings = BackendSettings()  # type: ignore[call-arg]


@lru_cache(maxsize=1)
def get_settings(**overrides: Any) -> AppSettings:
    """
    Cached accessor for process-wide settings.

    `overrides` are init kwargs → highest precedence (handy in tests).
    """
    settings = AppSettings(**overrides)
    resolve_backend(settings.backends.undirected, directed=False)
    resolve_backend(settings.backends.directed, directed=True)
    return settings


def resolve_backend(name: str, *, directed: Optional[bool] = None) -> type:
    """Map a backend name to its class, optionally checking directedness."""
    try:
        backend = BACKENDS[name]
    except KeyError:
        raise ConfigError(
            f"Unknown backend {name!r}; expected one of {sorted(BACKENDS)}"
        ) from None

    if directed is not None and backend.directed != directed:
        kind = "directed" if directed else "undirected"
        raise ConfigError(f"Backend {name!r} is not {kind}")
    return backend


def configure_logging(settings: Optional[AppSettings] = None) -> logging.Logger:
    """Apply LoggingSettings to the package logger and return it."""
    settings = settings or get_settings()
    logger = logging.getLogger("labelled_graphs")
    logger.setLevel(settings.logging.level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(settings.logging.format))
        logger.addHandler(handler)
    return logger
