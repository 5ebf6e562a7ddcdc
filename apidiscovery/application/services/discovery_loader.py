"""Loads discovery documents from the discovery service."""
from __future__ import annotations

import logging

from apidiscovery.domain.entities.discovery_document import ApiDefinition, DiscoveryDocument
from apidiscovery.domain.errors import DiscoveryParseError
from apidiscovery.domain.services.discovery_decoder import decode_api_definition
from apidiscovery.ports.output.http_transport import HttpTransport

logger = logging.getLogger(__name__)

DEFAULT_DISCOVERY_URL = 'http://www.googleapis.com/discovery/0.1/describe'


class DiscoveryDocumentLoader:
  """Fetches the JSON discovery document for an API and decodes it.

  Every call performs a fresh round trip; nothing is cached or retried.
  Most APIs have no 0.1 discovery entry, in which case the returned document
  has an empty API definition.
  """

  def __init__(self, transport: HttpTransport, discovery_url: str = DEFAULT_DISCOVERY_URL):
    self._transport = transport
    self._discovery_url = discovery_url

  def load(self, api_name: str) -> DiscoveryDocument:
    """Execute the discovery request for the API by the given name.

    Raises:
      IOError: If the request fails
      DiscoveryParseError: If the response is not a well-formed document
    """
    if not api_name:
      raise ValueError('api_name is required')

    request = self._transport.build_get_request(self._discovery_url, {'api': api_name})
    response = self._transport.execute(request)

    try:
      payload = response.json()
    except ValueError as e:
      raise DiscoveryParseError(
        f'Discovery response for {api_name!r} is not valid JSON: {e}', api_name=api_name
      ) from e

    if not isinstance(payload, dict):
      raise DiscoveryParseError(
        f'Discovery response for {api_name!r} is not a JSON object', api_name=api_name
      )

    if api_name not in payload:
      logger.warning('API %r not found in discovery response', api_name)
      return DiscoveryDocument(api_name=api_name, api_definition=ApiDefinition())

    api_definition = decode_api_definition(payload[api_name], where=api_name)
    logger.debug('Loaded %r with versions %s', api_name, list(api_definition))
    return DiscoveryDocument(api_name=api_name, api_definition=api_definition)
