"""Input port for formatting discovery results."""
from __future__ import annotations

from typing import Any, Protocol

from apidiscovery.domain.entities.discovery_document import DiscoveryDocument
from apidiscovery.domain.value_objects.http_request import HttpRequest, HttpResponse


class ResultPresenter(Protocol):
  def present_document(self, document: DiscoveryDocument) -> Any:
    ...

  def present_request(self, request: HttpRequest) -> Any:
    ...

  def present_response(self, response: HttpResponse) -> Any:
    ...

  def present_error(self, error: Exception) -> Any:
    ...
