"""Value object for dotted 'resourceName.methodName' identifiers."""
from __future__ import annotations

from dataclasses import dataclass

from apidiscovery.domain.errors import InvalidMethodIdentifierError


@dataclass(frozen=True)
class MethodIdentifier:
  """A method identifier split at its first dot.

  The method name keeps any further dots, so 'res.a.b' names method 'a.b'
  of resource 'res'.
  """

  resource_name: str
  method_name: str

  @staticmethod
  def parse(value: str) -> 'MethodIdentifier':
    resource_name, dot, method_name = value.partition('.')
    if not dot:
      raise InvalidMethodIdentifierError(
        f"Method identifier must be of format 'resourceName.methodName': {value!r}"
      )
    return MethodIdentifier(resource_name=resource_name, method_name=method_name)

  def __str__(self) -> str:
    return f'{self.resource_name}.{self.method_name}'
