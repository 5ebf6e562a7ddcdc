"""Domain service mapping discovery JSON to and from domain entities."""
from __future__ import annotations

from typing import Any, Dict, Mapping

from apidiscovery.domain.entities.discovery_document import (
  ApiDefinition,
  ServiceDefinition,
  ServiceMethod,
  ServiceParameter,
  ServiceResource,
)
from apidiscovery.domain.errors import DiscoveryParseError


def _expect_object(value: Any, where: str) -> Mapping[str, Any]:
  if not isinstance(value, Mapping):
    raise DiscoveryParseError(f'Expected a JSON object at {where}, got {type(value).__name__}')
  return value


def _expect_string(value: Any, where: str) -> str:
  if not isinstance(value, str):
    raise DiscoveryParseError(f'Expected a string at {where}, got {type(value).__name__}')
  return value


def _get_or_empty(data: Mapping[str, Any], key: str) -> Any:
  value = data.get(key)
  return {} if value is None else value


def _get_or_default(data: Mapping[str, Any], key: str, default: str) -> Any:
  value = data.get(key)
  return default if value is None else value


def decode_parameter(payload: Any, where: str = 'parameter') -> ServiceParameter:
  data = _expect_object(payload, where)
  required = data.get('required')
  if required is None:
    required = False
  if not isinstance(required, bool):
    raise DiscoveryParseError(f'Expected a boolean at {where}.required')
  return ServiceParameter(required=required)


def decode_method(payload: Any, where: str = 'method') -> ServiceMethod:
  data = _expect_object(payload, where)
  parameters = _expect_object(_get_or_empty(data, 'parameters'), f'{where}.parameters')
  return ServiceMethod(
    path_url=_expect_string(_get_or_default(data, 'pathUrl', ''), f'{where}.pathUrl'),
    http_method=_expect_string(_get_or_default(data, 'httpMethod', 'GET'), f'{where}.httpMethod').upper(),
    parameters={
      name: decode_parameter(value, f'{where}.parameters.{name}')
      for name, value in parameters.items()
    },
  )


def decode_resource(payload: Any, where: str = 'resource') -> ServiceResource:
  data = _expect_object(payload, where)
  methods = _expect_object(_get_or_empty(data, 'methods'), f'{where}.methods')
  return ServiceResource(
    methods={
      name: decode_method(value, f'{where}.methods.{name}')
      for name, value in methods.items()
    },
  )


def decode_service_definition(payload: Any, where: str = 'service') -> ServiceDefinition:
  data = _expect_object(payload, where)
  resources = _expect_object(_get_or_empty(data, 'resources'), f'{where}.resources')
  return ServiceDefinition(
    base_url=_expect_string(_get_or_default(data, 'baseUrl', ''), f'{where}.baseUrl'),
    resources={
      name: decode_resource(value, f'{where}.resources.{name}')
      for name, value in resources.items()
    },
  )


def decode_api_definition(payload: Any, where: str = 'api') -> ApiDefinition:
  """Decode a 'version -> service' object, keeping the document's key order."""
  data = _expect_object(payload, where)
  return ApiDefinition(
    (version, decode_service_definition(value, f'{where}.{version}'))
    for version, value in data.items()
  )


def encode_method(method: ServiceMethod) -> Dict[str, Any]:
  return {
    'pathUrl': method.path_url,
    'httpMethod': method.http_method,
    'methodType': method.method_type,
    'parameters': {
      name: {'required': param.required}
      for name, param in method.parameters.items()
    },
  }


def encode_service_definition(service: ServiceDefinition) -> Dict[str, Any]:
  return {
    'baseUrl': service.base_url,
    'resources': {
      resource_name: {
        'methods': {
          method_name: encode_method(method)
          for method_name, method in resource.methods.items()
        },
      }
      for resource_name, resource in service.resources.items()
    },
  }


def encode_api_definition(api_definition: ApiDefinition) -> Dict[str, Any]:
  return {
    version: encode_service_definition(service)
    for version, service in api_definition.items()
  }
