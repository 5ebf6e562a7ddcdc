"""Requests-based HTTP transport implementation."""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

import requests

from apidiscovery.domain.value_objects.http_request import HttpRequest, HttpResponse
from apidiscovery.ports.output.http_transport import HttpTransport

logger = logging.getLogger(__name__)

QUERY_STRING_METHODS = frozenset({'GET', 'DELETE', 'HEAD', 'OPTIONS'})


class RequestsHttpTransport(HttpTransport):
  """Performs HTTP calls using the requests library."""

  def __init__(self, session: Optional[requests.Session] = None, timeout: int = 30):
    self._session = session or requests.Session()
    self._timeout = timeout

  def build_get_request(
    self, url: str, params: Optional[Mapping[str, Any]] = None
  ) -> HttpRequest:
    return HttpRequest(method='GET', url=url, params=dict(params or {}))

  def build_request(
    self, method: str, url: str, parameters: Optional[Mapping[str, Any]] = None
  ) -> HttpRequest:
    """Merge parameters into a request.

    Parameters named by a {placeholder} in the URL are substituted into it.
    The rest go to the query string for GET, DELETE, HEAD and OPTIONS, and
    to a JSON body for every other verb.
    """
    method = method.upper()
    remaining: Dict[str, Any] = {}

    for key, value in (parameters or {}).items():
      placeholder = f'{{{key}}}'
      if placeholder in url:
        url = url.replace(placeholder, quote(str(value), safe=''))
      else:
        remaining[key] = value

    if method in QUERY_STRING_METHODS:
      return HttpRequest(method=method, url=url, params=remaining)
    return HttpRequest(method=method, url=url, json_body=remaining or None)

  def execute(self, request: HttpRequest) -> HttpResponse:
    """Execute the request. requests.RequestException propagates unchanged."""
    logger.debug('%s %s params=%s', request.method, request.url, request.params)
    response = self._session.request(
      request.method,
      request.url,
      params=request.params or None,
      json=request.json_body,
      headers=request.headers or None,
      timeout=self._timeout,
    )
    response.raise_for_status()
    logger.debug('%s %s -> %s', request.method, request.url, response.status_code)

    return HttpResponse(
      status_code=response.status_code,
      content=response.content,
      headers=dict(response.headers),
    )
