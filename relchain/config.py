"""
Configuration

Dataclass configs for the view engine and the API server. Server values
can be overridden from RELCHAIN_* environment variables.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Mapping, Optional
import logging
import os

_LOGGER = logging.getLogger(__name__)

DEFAULT_PORT = 8000


@dataclass
class EngineConfig:
    """Configuration for ChainViewEngine memoisation."""
    cache_enabled: bool = True
    max_cache_entries: int = 128


@dataclass
class ServerConfig:
    """Configuration for the read API."""
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    graph_path: Optional[str] = None
    log_level: str = "INFO"

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> ServerConfig:
        env = os.environ if environ is None else environ
        return ServerConfig(
            host=env.get("RELCHAIN_HOST", "0.0.0.0"),
            port=_parse_port(env.get("RELCHAIN_PORT")),
            graph_path=env.get("RELCHAIN_GRAPH_PATH") or None,
            log_level=env.get("RELCHAIN_LOG_LEVEL", "INFO").upper(),
        )


def _parse_port(raw: Optional[str]) -> int:
    """RELCHAIN_PORT as an int; unset or non-numeric values fall back to the default."""
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        _LOGGER.warning("Ignoring non-numeric RELCHAIN_PORT=%r; using %d", raw, DEFAULT_PORT)
        return DEFAULT_PORT


@dataclass
class AppConfig:
    """Unified configuration for the whole package."""
    engine: EngineConfig = None
    server: ServerConfig = None

    def __post_init__(self):
        self.engine = self.engine or EngineConfig()
        self.server = self.server or ServerConfig()

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
        return AppConfig(server=ServerConfig.from_env(environ))


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
