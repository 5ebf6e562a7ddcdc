"""Exceptions raised while loading and resolving discovery documents."""
from __future__ import annotations

from typing import Optional


class DiscoveryError(Exception):
  """Base exception for discovery-related errors."""

  def __init__(self, message: str, api_name: Optional[str] = None):
    super().__init__(message)
    self.api_name = api_name


class DiscoveryParseError(DiscoveryError, ValueError):
  """The discovery response is not valid JSON or has an unexpected shape."""


class InvalidMethodIdentifierError(DiscoveryError, ValueError):
  """A method identifier is not of the form 'resourceName.methodName'."""


class MethodNotFoundError(DiscoveryError, LookupError):
  """A method identifier does not resolve against a service definition."""

  def __init__(self, method_identifier: str, api_name: Optional[str] = None):
    super().__init__(f'Unknown method: {method_identifier}', api_name=api_name)
    self.method_identifier = method_identifier


class VersionNotFoundError(DiscoveryError, LookupError):
  """The requested version is not defined in the discovery document."""

  def __init__(self, version: str, api_name: Optional[str] = None):
    super().__init__(f'Unknown version: {version}', api_name=api_name)
    self.version = version
