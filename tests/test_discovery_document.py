import pytest

from apidiscovery.adapters.output.http.requests_transport import RequestsHttpTransport
from apidiscovery.domain.entities.discovery_document import (
  ApiDefinition,
  DiscoveryDocument,
  ServiceDefinition,
  ServiceMethod,
  ServiceParameter,
  ServiceResource,
)
from apidiscovery.domain.errors import (
  DiscoveryError,
  InvalidMethodIdentifierError,
  MethodNotFoundError,
  VersionNotFoundError,
)
from apidiscovery.domain.value_objects.method_identifier import MethodIdentifier

METHOD_X = ServiceMethod(
  path_url='items',
  http_method='GET',
  parameters={'q': ServiceParameter(required=True), 'limit': ServiceParameter()},
)
DOTTED = ServiceMethod(path_url='dotted', http_method='POST')

SERVICE = ServiceDefinition(
  base_url='http://host/api/',
  resources={'resA': ServiceResource(methods={'methodX': METHOD_X, 'a.b': DOTTED})},
)


def test_resolves_resource_method():
  assert SERVICE.get_resource_method('resA.methodX') is METHOD_X


def test_missing_resource_or_method_is_none():
  assert SERVICE.get_resource_method('missing.methodX') is None
  assert SERVICE.get_resource_method('resA.missing') is None


def test_splits_only_at_first_dot():
  assert SERVICE.get_resource_method('resA.a.b') is DOTTED
  assert MethodIdentifier.parse('res.a.b') == MethodIdentifier('res', 'a.b')


def test_identifier_without_dot_is_rejected():
  with pytest.raises(InvalidMethodIdentifierError):
    SERVICE.get_resource_method('resA')


def test_resource_url_joins_base_and_path():
  assert SERVICE.get_resource_url('resA.methodX') == 'http://host/api/items'
  with pytest.raises(MethodNotFoundError):
    SERVICE.get_resource_url('resA.nothing')


def test_method_defaults():
  assert METHOD_X.method_type == 'rest'
  assert METHOD_X.required_parameters() == ('q',)


def test_legacy_service_definition_is_first_version():
  other = ServiceDefinition(base_url='http://host/v2/')
  document = DiscoveryDocument('demo', ApiDefinition([('v1', SERVICE), ('v2', other)]))

  assert document.service_definition is SERVICE
  assert document.versions == ('v1', 'v2')
  assert document.get_api().version == 'v1'
  assert document.get_api('v2').service_definition is other


def test_empty_document_has_no_legacy_definition():
  document = DiscoveryDocument('demo')

  assert document.service_definition is None
  assert len(document.api_definition) == 0
  with pytest.raises(DiscoveryError):
    document.get_api()


def test_unknown_version():
  document = DiscoveryDocument('demo', ApiDefinition({'v1': SERVICE}))
  with pytest.raises(VersionNotFoundError) as exc_info:
    document.get_api('v9')
  assert exc_info.value.version == 'v9'


def test_build_request_uses_base_url_and_verb():
  document = DiscoveryDocument('demo', ApiDefinition({'v1': SERVICE}))

  request = document.build_request(RequestsHttpTransport(), 'resA.methodX', {'q': 'val'})

  assert request.method == 'GET'
  assert request.url == 'http://host/api/items'
  assert request.params == {'q': 'val'}
  assert request.json_body is None


def test_build_request_fails_fast_on_unknown_method():
  document = DiscoveryDocument('demo', ApiDefinition({'v1': SERVICE}))

  with pytest.raises(MethodNotFoundError) as exc_info:
    document.build_request(RequestsHttpTransport(), 'resA.unknown')
  assert exc_info.value.method_identifier == 'resA.unknown'
  assert exc_info.value.api_name == 'demo'


def test_entities_are_immutable():
  with pytest.raises(AttributeError):
    SERVICE.base_url = 'http://elsewhere/'  # type: ignore[misc]


def test_entity_mappings_are_read_only():
  with pytest.raises(TypeError):
    SERVICE.resources['injected'] = ServiceResource()  # type: ignore[index]
  with pytest.raises(TypeError):
    del SERVICE.resources['resA']  # type: ignore[attr-defined]
  with pytest.raises(TypeError):
    SERVICE.resources['resA'].methods['other'] = DOTTED  # type: ignore[index]
  with pytest.raises(TypeError):
    METHOD_X.parameters['q'] = ServiceParameter()  # type: ignore[index]


def test_entities_copy_caller_mappings():
  parameters = {'q': ServiceParameter(required=True)}
  method = ServiceMethod(path_url='items', http_method='GET', parameters=parameters)

  parameters['extra'] = ServiceParameter()

  assert list(method.parameters) == ['q']


def test_entities_are_hashable():
  same = ServiceDefinition(
    base_url='http://host/api/',
    resources={'resA': ServiceResource(methods={'a.b': DOTTED, 'methodX': METHOD_X})},
  )
  document = DiscoveryDocument('demo', ApiDefinition({'v1': SERVICE}))

  assert same == SERVICE
  assert hash(same) == hash(SERVICE)
  assert len({METHOD_X, DOTTED, METHOD_X}) == 2
  assert {document: 'loaded'}[DiscoveryDocument('demo', ApiDefinition({'v1': same}))] == 'loaded'
