"""Simple dependency wiring helpers."""
from __future__ import annotations

from functools import lru_cache

from apidiscovery.adapters.output.http.requests_transport import RequestsHttpTransport
from apidiscovery.application.services.discovery_loader import DiscoveryDocumentLoader
from apidiscovery.application.services.discovery_service_impl import DiscoveryServiceImpl
from apidiscovery.common.config import get_settings


@lru_cache(maxsize=1)
def create_discovery_service():
  settings = get_settings()
  transport = RequestsHttpTransport(timeout=settings.timeout)
  loader = DiscoveryDocumentLoader(transport, discovery_url=settings.discovery_url)
  return DiscoveryServiceImpl(loader, transport)
