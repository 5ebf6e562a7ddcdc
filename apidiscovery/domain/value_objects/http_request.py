"""Value objects describing HTTP requests and responses."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class HttpRequest:
  """An HTTP request ready to be executed by a transport."""

  method: str
  url: str
  params: Dict[str, Any] = field(default_factory=dict)
  json_body: Optional[Dict[str, Any]] = None
  headers: Dict[str, str] = field(default_factory=dict)

  def __post_init__(self) -> None:
    if not self.method:
      raise ValueError('HTTP method is required')
    if not self.url:
      raise ValueError('URL is required')


@dataclass(frozen=True)
class HttpResponse:
  """The result of executing an HttpRequest."""

  status_code: int
  content: bytes = b''
  headers: Dict[str, str] = field(default_factory=dict)

  @property
  def text(self) -> str:
    return self.content.decode('utf-8', errors='replace')

  def json(self) -> Any:
    """Decode the body as JSON. Raises ValueError on malformed content."""
    return json.loads(self.content)
