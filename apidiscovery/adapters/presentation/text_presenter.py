"""Plain text presenter."""
from __future__ import annotations

from typing import List

from apidiscovery.domain.entities.discovery_document import DiscoveryDocument
from apidiscovery.domain.value_objects.http_request import HttpRequest, HttpResponse
from apidiscovery.ports.input.result_presenter import ResultPresenter


class TextPresenter(ResultPresenter):
  def present_document(self, document: DiscoveryDocument) -> str:
    lines = [
      '=' * 60,
      f'API: {document.api_name}',
      '=' * 60,
    ]

    if not document.api_definition:
      lines.append('(no versions found)')
      return '\n'.join(lines)

    default_version = document.api_definition.first_version()
    for version, service in document.api_definition.items():
      marker = ' (default)' if version == default_version else ''
      lines.append(f'{version}{marker}: {service.base_url}')
      for resource_name, resource in service.resources.items():
        for method_name, method in resource.methods.items():
          lines.append(
            f'  {resource_name}.{method_name}  {method.http_method} {method.path_url}'
          )
          required = method.required_parameters()
          if required:
            lines.append(f'    required: {", ".join(required)}')
      lines.append('')

    return '\n'.join(lines)

  def present_request(self, request: HttpRequest) -> str:
    lines: List[str] = [f'{request.method} {request.url}']
    for key, value in request.params.items():
      lines.append(f'- {key}: {value}')
    if request.json_body is not None:
      lines.append(f'body: {request.json_body}')
    return '\n'.join(lines)

  def present_response(self, response: HttpResponse) -> str:
    return f'HTTP {response.status_code}\n\n{response.text}'

  def present_error(self, error: Exception) -> str:
    return f'ERROR: {error}'
