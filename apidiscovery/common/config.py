"""Application-level configuration utilities."""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

from apidiscovery.application.services.discovery_loader import DEFAULT_DISCOVERY_URL


@dataclass(frozen=True)
class Settings:
  """Immutable application settings loaded from environment variables."""

  discovery_url: str = DEFAULT_DISCOVERY_URL
  timeout: int = 30
  log_level: str = 'INFO'

  def __post_init__(self) -> None:
    if self.timeout <= 0:
      raise ValueError('timeout must be positive')


@lru_cache(maxsize=1)
def get_settings() -> Settings:
  """Load settings from environment variables once per process."""
  env_path = Path(__file__).resolve().parents[2] / '.env'
  if env_path.exists():
    load_dotenv(env_path)
  else:
    load_dotenv()

  from os import getenv

  timeout = getenv('DISCOVERY_TIMEOUT', '30')
  try:
    timeout_seconds = int(timeout)
  except ValueError as e:
    raise ValueError(f'DISCOVERY_TIMEOUT must be an integer, got {timeout!r}') from e

  return Settings(
    discovery_url=getenv('DISCOVERY_URL') or DEFAULT_DISCOVERY_URL,
    timeout=timeout_seconds,
    log_level=(getenv('LOG_LEVEL') or 'INFO').upper(),
  )
