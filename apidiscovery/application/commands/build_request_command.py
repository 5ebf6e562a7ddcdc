"""Command object representing a request against a discovered API method."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class BuildRequestCommand:
  """Command for building a request for 'resourceName.methodName' of an API."""
  api_name: str
  method_identifier: str
  parameters: Dict[str, Any] = field(default_factory=dict)
  version: Optional[str] = None

  def __post_init__(self) -> None:
    if not self.api_name:
      raise ValueError('api_name is required')
    if not self.method_identifier:
      raise ValueError('method_identifier is required')
