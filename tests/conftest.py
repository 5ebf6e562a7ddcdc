import json
from typing import Any, Dict, List, Mapping, Optional

import pytest

from apidiscovery.adapters.output.http.requests_transport import RequestsHttpTransport
from apidiscovery.domain.value_objects.http_request import HttpRequest, HttpResponse

BUZZ_DISCOVERY: Dict[str, Any] = {
  'buzz': {
    'v1': {
      'baseUrl': 'https://www.googleapis.com/buzz/v1/',
      'resources': {
        'activities': {
          'methods': {
            'list': {
              'pathUrl': 'activities/{userId}/{scope}',
              'httpMethod': 'GET',
              'parameters': {
                'userId': {'required': True},
                'scope': {'required': True},
                'max-results': {'required': False},
              },
            },
            'insert': {
              'pathUrl': 'activities/{userId}/@self',
              'httpMethod': 'POST',
              'parameters': {'userId': {'required': True}},
            },
          },
        },
        'people': {
          'methods': {
            'get': {'pathUrl': 'people/{userId}/@self', 'httpMethod': 'GET'},
          },
        },
      },
    },
    'v2': {
      'baseUrl': 'https://www.googleapis.com/buzz/v2/',
      'resources': {},
    },
  },
}


class FakeTransport(RequestsHttpTransport):
  """Keeps the requests merge rule but answers execute() from canned bodies."""

  def __init__(self, body: Any = None, content: Optional[bytes] = None, error: Optional[Exception] = None):
    super().__init__(session=None)
    self._content = content if content is not None else json.dumps(body).encode('utf-8')
    self._error = error
    self.executed: List[HttpRequest] = []

  def execute(self, request: HttpRequest) -> HttpResponse:
    self.executed.append(request)
    if self._error is not None:
      raise self._error
    return HttpResponse(status_code=200, content=self._content)


@pytest.fixture
def buzz_payload() -> Mapping[str, Any]:
  return BUZZ_DISCOVERY


@pytest.fixture
def buzz_transport() -> FakeTransport:
  return FakeTransport(BUZZ_DISCOVERY)
