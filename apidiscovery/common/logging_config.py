"""Logging setup shared by the entrypoints."""
from __future__ import annotations

import logging
from typing import Dict

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'

MODULE_LEVELS: Dict[str, str] = {'urllib3': 'WARNING'}


def configure_logging(level: str = 'INFO') -> None:
  """Configure root logging once; later calls only adjust the level."""
  root = logging.getLogger()
  if not root.handlers:
    logging.basicConfig(format=LOG_FORMAT)
  root.setLevel(getattr(logging, level.upper(), logging.INFO))

  for name, module_level in MODULE_LEVELS.items():
    logging.getLogger(name).setLevel(module_level)
