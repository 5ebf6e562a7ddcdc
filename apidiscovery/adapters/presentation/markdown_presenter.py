"""Markdown presenter for report-style outputs."""
from __future__ import annotations

import json

from apidiscovery.domain.entities.discovery_document import DiscoveryDocument
from apidiscovery.domain.value_objects.http_request import HttpRequest, HttpResponse
from apidiscovery.ports.input.result_presenter import ResultPresenter


class MarkdownPresenter(ResultPresenter):
  def present_document(self, document: DiscoveryDocument) -> str:
    lines = [f'# {document.api_name}', '']

    if not document.api_definition:
      lines.append('_No versions found._')
      return '\n'.join(lines)

    for version, service in document.api_definition.items():
      lines.extend([f'## {version}', '', f'**Base URL:** `{service.base_url}`', ''])
      lines.append('| Method | Verb | Path | Required |')
      lines.append('| --- | --- | --- | --- |')
      for resource_name, resource in service.resources.items():
        for method_name, method in resource.methods.items():
          required = ', '.join(method.required_parameters()) or '-'
          lines.append(
            f'| `{resource_name}.{method_name}` | {method.http_method} '
            f'| `{method.path_url}` | {required} |'
          )
      lines.append('')

    return '\n'.join(lines)

  def present_request(self, request: HttpRequest) -> str:
    lines = ['# Request', '', f'`{request.method} {request.url}`', '']
    if request.params:
      lines.extend(['## Query', ''])
      for key, value in request.params.items():
        lines.append(f'- **{key}**: {value}')
    if request.json_body is not None:
      body = json.dumps(request.json_body, ensure_ascii=False, indent=2, default=str)
      lines.extend(['', '## Body', '', '```json', body, '```'])
    return '\n'.join(lines)

  def present_response(self, response: HttpResponse) -> str:
    return f'# Response\n\n**Status:** {response.status_code}\n\n```\n{response.text}\n```'

  def present_error(self, error: Exception) -> str:
    return f'# Error\n\n{error}'
