"""Input port defining the discovery service contract."""
from __future__ import annotations

from typing import Protocol

from apidiscovery.application.commands.build_request_command import BuildRequestCommand
from apidiscovery.domain.entities.discovery_document import DiscoveryDocument
from apidiscovery.domain.value_objects.http_request import HttpRequest, HttpResponse


class DiscoveryService(Protocol):
  def describe(self, api_name: str) -> DiscoveryDocument:
    ...

  def build_request(self, command: BuildRequestCommand) -> HttpRequest:
    ...

  def execute_request(self, command: BuildRequestCommand) -> HttpResponse:
    ...
