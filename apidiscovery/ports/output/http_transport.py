"""Output port for HTTP transport."""
from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from apidiscovery.domain.value_objects.http_request import HttpRequest, HttpResponse


class HttpTransport(Protocol):
  """Interface for building and executing HTTP requests.

  Implementations own the rule for merging caller parameters into a request
  (path placeholders, query string or body). Network failures are raised as
  IOError subclasses and are not retried.
  """

  def build_get_request(
    self, url: str, params: Optional[Mapping[str, Any]] = None
  ) -> HttpRequest:
    """Build a GET request with the given query parameters."""
    ...

  def build_request(
    self, method: str, url: str, parameters: Optional[Mapping[str, Any]] = None
  ) -> HttpRequest:
    """Build a request for the verb, merging parameters into it.

    Args:
      method: HTTP verb, e.g. GET or POST
      url: Absolute URL, possibly containing {name} placeholders
      parameters: User defined key / value data

    Returns:
      HttpRequest ready for execute()
    """
    ...

  def execute(self, request: HttpRequest) -> HttpResponse:
    """Execute the request and return its response.

    Raises:
      IOError: If the request cannot be completed
    """
    ...
