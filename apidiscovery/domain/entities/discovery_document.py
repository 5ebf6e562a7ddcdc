"""Domain entities describing a discovery document."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import (
  TYPE_CHECKING,
  Any,
  Iterable,
  Iterator,
  Mapping,
  Optional,
  Tuple,
  Union,
)

from apidiscovery.domain.errors import DiscoveryError, MethodNotFoundError, VersionNotFoundError
from apidiscovery.domain.value_objects.http_request import HttpRequest
from apidiscovery.domain.value_objects.method_identifier import MethodIdentifier

if TYPE_CHECKING:
  from apidiscovery.ports.output.http_transport import HttpTransport


def _read_only(mapping: Mapping[str, Any]) -> Mapping[str, Any]:
  """Copy a mapping into a read-only view."""
  return MappingProxyType(dict(mapping))


def _hash_mapping(mapping: Mapping[str, Any]) -> int:
  return hash(frozenset(mapping.items()))


@dataclass(frozen=True)
class ServiceParameter:
  """Defines a parameter to a service method."""

  required: bool = False


@dataclass(frozen=True)
class ServiceMethod:
  """Defines a method of a service resource."""

  path_url: str
  http_method: str
  parameters: Mapping[str, ServiceParameter] = field(default_factory=dict)
  method_type: str = field(default='rest', init=False)

  def __post_init__(self) -> None:
    object.__setattr__(self, 'parameters', _read_only(self.parameters))

  def __hash__(self) -> int:
    return hash((self.path_url, self.http_method, _hash_mapping(self.parameters)))

  def required_parameters(self) -> Tuple[str, ...]:
    return tuple(name for name, param in self.parameters.items() if param.required)


@dataclass(frozen=True)
class ServiceResource:
  """Defines a resource in a service definition."""

  methods: Mapping[str, ServiceMethod] = field(default_factory=dict)

  def __post_init__(self) -> None:
    object.__setattr__(self, 'methods', _read_only(self.methods))

  def __hash__(self) -> int:
    return _hash_mapping(self.methods)


@dataclass(frozen=True)
class ServiceDefinition:
  """Defines a specific version of an API."""

  base_url: str
  resources: Mapping[str, ServiceResource] = field(default_factory=dict)

  def __post_init__(self) -> None:
    object.__setattr__(self, 'resources', _read_only(self.resources))

  def __hash__(self) -> int:
    return hash((self.base_url, _hash_mapping(self.resources)))

  def get_resource_method(self, method_identifier: str) -> Optional[ServiceMethod]:
    """Return the method for an identifier of format 'resourceName.methodName'.

    Unknown resources and methods yield None. An identifier without a dot
    raises InvalidMethodIdentifierError.
    """
    identifier = MethodIdentifier.parse(method_identifier)
    resource = self.resources.get(identifier.resource_name)
    if resource is None:
      return None
    return resource.methods.get(identifier.method_name)

  def get_resource_url(self, method_identifier: str) -> str:
    """Return the absolute URL of the method named by the identifier."""
    method = self.get_resource_method(method_identifier)
    if method is None:
      raise MethodNotFoundError(method_identifier)
    return self.base_url + method.path_url


class ApiDefinition(Mapping[str, ServiceDefinition]):
  """Defines all versions of an API, in document order."""

  def __init__(
    self,
    versions: Union[Mapping[str, ServiceDefinition], Iterable[Tuple[str, ServiceDefinition]], None] = None,
  ) -> None:
    self._versions: Mapping[str, ServiceDefinition] = MappingProxyType(dict(versions or {}))

  def __getitem__(self, version: str) -> ServiceDefinition:
    return self._versions[version]

  def __iter__(self) -> Iterator[str]:
    return iter(self._versions)

  def __len__(self) -> int:
    return len(self._versions)

  def __repr__(self) -> str:
    return f'ApiDefinition({dict(self._versions)!r})'

  def __hash__(self) -> int:
    return _hash_mapping(self._versions)

  def first_version(self) -> Optional[str]:
    return next(iter(self._versions), None)

  def first(self) -> Optional[ServiceDefinition]:
    version = self.first_version()
    return None if version is None else self._versions[version]


@dataclass(frozen=True)
class VersionedApi:
  """A single version of a named API, able to build requests for its methods."""

  name: str
  version: str
  service_definition: ServiceDefinition

  def build_request(
    self,
    transport: 'HttpTransport',
    method_identifier: str,
    parameters: Optional[Mapping[str, Any]] = None,
  ) -> HttpRequest:
    """Build (but do not execute) the HTTP request for a method.

    Raises MethodNotFoundError when the identifier does not resolve.
    """
    method = self.service_definition.get_resource_method(method_identifier)
    if method is None:
      raise MethodNotFoundError(method_identifier, api_name=self.name)
    url = self.service_definition.base_url + method.path_url
    return transport.build_request(method.http_method, url, parameters)


@dataclass(frozen=True)
class DiscoveryDocument:
  """A discovery document loaded for one API name.

  ``service_definition`` is the first version in document order, kept for
  callers that predate multi-version support. It is None when the document
  defines no versions.
  """

  api_name: str
  api_definition: ApiDefinition = field(default_factory=ApiDefinition)
  service_definition: Optional[ServiceDefinition] = field(default=None, init=False)

  def __post_init__(self) -> None:
    object.__setattr__(self, 'service_definition', self.api_definition.first())

  @property
  def versions(self) -> Tuple[str, ...]:
    return tuple(self.api_definition)

  def get_api(self, version: Optional[str] = None) -> VersionedApi:
    """Return the given version of the API, or the default version when omitted."""
    if version is None:
      version = self.api_definition.first_version()
      if version is None:
        raise DiscoveryError(
          f"Discovery document for '{self.api_name}' defines no versions",
          api_name=self.api_name,
        )
    elif version not in self.api_definition:
      raise VersionNotFoundError(version, api_name=self.api_name)

    return VersionedApi(
      name=self.api_name,
      version=version,
      service_definition=self.api_definition[version],
    )

  def build_request(
    self,
    transport: 'HttpTransport',
    method_identifier: str,
    parameters: Optional[Mapping[str, Any]] = None,
  ) -> HttpRequest:
    """Build a request against the default version of the API."""
    return self.get_api().build_request(transport, method_identifier, parameters)
