"""JSON presenter implementation."""
from __future__ import annotations

import json
from typing import Any

from apidiscovery.domain.entities.discovery_document import DiscoveryDocument
from apidiscovery.domain.services.discovery_decoder import encode_api_definition
from apidiscovery.domain.value_objects.http_request import HttpRequest, HttpResponse
from apidiscovery.ports.input.result_presenter import ResultPresenter


class JsonPresenter(ResultPresenter):
  def present_document(self, document: DiscoveryDocument) -> str:
    payload = {document.api_name: encode_api_definition(document.api_definition)}
    return json.dumps(payload, ensure_ascii=False, indent=2)

  def present_request(self, request: HttpRequest) -> str:
    payload = {
      'method': request.method,
      'url': request.url,
      'params': request.params,
      'json': request.json_body,
      'headers': request.headers,
    }
    return json.dumps(payload, ensure_ascii=False, indent=2, default=str)

  def present_response(self, response: HttpResponse) -> str:
    try:
      data: Any = response.json()
    except ValueError:
      data = {'raw_text': response.text}
    payload = {
      'status_code': response.status_code,
      'headers': response.headers,
      'data': data,
    }
    return json.dumps(payload, ensure_ascii=False, indent=2)

  def present_error(self, error: Exception) -> str:
    return json.dumps(
      {'status': 'error', 'type': type(error).__name__, 'error': str(error)},
      ensure_ascii=False,
      indent=2,
    )
