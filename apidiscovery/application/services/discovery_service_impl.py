"""Implementation of the discovery service port."""
from __future__ import annotations

import logging

from apidiscovery.application.commands.build_request_command import BuildRequestCommand
from apidiscovery.application.services.discovery_loader import DiscoveryDocumentLoader
from apidiscovery.domain.entities.discovery_document import DiscoveryDocument
from apidiscovery.domain.value_objects.http_request import HttpRequest, HttpResponse
from apidiscovery.ports.input.discovery_service import DiscoveryService
from apidiscovery.ports.output.http_transport import HttpTransport

logger = logging.getLogger(__name__)


class DiscoveryServiceImpl(DiscoveryService):
  """Loads discovery documents and builds requests from them."""

  def __init__(self, loader: DiscoveryDocumentLoader, transport: HttpTransport) -> None:
    self._loader = loader
    self._transport = transport

  def describe(self, api_name: str) -> DiscoveryDocument:
    return self._loader.load(api_name)

  def build_request(self, command: BuildRequestCommand) -> HttpRequest:
    document = self._loader.load(command.api_name)
    api = document.get_api(command.version)
    logger.info('Building %s for %s %s', command.method_identifier, api.name, api.version)
    return api.build_request(self._transport, command.method_identifier, command.parameters)

  def execute_request(self, command: BuildRequestCommand) -> HttpResponse:
    request = self.build_request(command)
    return self._transport.execute(request)
