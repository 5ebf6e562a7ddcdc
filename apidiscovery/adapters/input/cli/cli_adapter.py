"""CLI adapter for interacting with the discovery service."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Dict, Iterator, Mapping, Optional, Tuple

import click
import requests

from apidiscovery.application.commands.build_request_command import BuildRequestCommand
from apidiscovery.domain.errors import DiscoveryError
from apidiscovery.ports.input.discovery_service import DiscoveryService
from apidiscovery.ports.input.result_presenter import ResultPresenter


class CLIAdapter:
  def __init__(self, discovery_service: DiscoveryService, presenters: Mapping[str, ResultPresenter]):
    if not presenters:
      raise ValueError('At least one presenter is required')
    self._discovery_service = discovery_service
    self._presenters = dict(presenters)

  def build_cli(self) -> click.Group:
    formats = list(self._presenters)

    @click.group()
    @click.option('--format', 'output_format', type=click.Choice(formats), default=formats[0],
                  help='Output format')
    @click.pass_context
    def cli(ctx: click.Context, output_format: str) -> None:
      """Inspect discovery documents and build requests from them."""
      ctx.obj = self._presenters[output_format]

    @cli.command('describe')
    @click.option('--api', 'api_name', required=True, help='API name, e.g. buzz')
    @click.pass_obj
    def describe(presenter: ResultPresenter, api_name: str) -> None:
      """List the versions, resources and methods of an API."""
      with _reporting_errors(presenter):
        document = self._discovery_service.describe(api_name)
      click.echo(presenter.present_document(document))

    @cli.command('request')
    @click.option('--api', 'api_name', required=True, help='API name, e.g. buzz')
    @click.option('--method', 'method_identifier', required=True,
                  help='Method identifier of format resourceName.methodName')
    @click.option('--version', default=None, help='API version (default: first in document)')
    @click.option('--param', 'params', multiple=True, callback=_parse_params,
                  help='Request parameter as key=value (repeatable)')
    @click.option('--execute', is_flag=True, default=False, help='Send the request and print the response')
    @click.pass_obj
    def request(
      presenter: ResultPresenter,
      api_name: str,
      method_identifier: str,
      version: Optional[str],
      params: Dict[str, str],
      execute: bool,
    ) -> None:
      """Build the HTTP request for a method.

      Examples:

        cli request --api buzz --method activities.list --param userId=@me

        cli --format json request --api buzz --method activities.list --version v1 --execute
      """
      with _reporting_errors(presenter):
        command = BuildRequestCommand(
          api_name=api_name,
          method_identifier=method_identifier,
          parameters=params,
          version=version,
        )
        if execute:
          output = presenter.present_response(self._discovery_service.execute_request(command))
        else:
          output = presenter.present_request(self._discovery_service.build_request(command))
      click.echo(output)

    return cli

  def run(self) -> None:
    self.build_cli()()


def _parse_params(ctx: click.Context, param: click.Parameter, values: Tuple[str, ...]) -> Dict[str, str]:
  """Turn repeated key=value options into a dict."""
  parsed: Dict[str, str] = {}
  for value in values:
    key, sep, raw = value.partition('=')
    if not sep or not key:
      raise click.BadParameter(f'expected key=value, got {value!r}')
    parsed[key] = raw
  return parsed


@contextmanager
def _reporting_errors(presenter: ResultPresenter) -> Iterator[None]:
  """Render discovery, validation and transport errors through the presenter and exit 1."""
  try:
    yield
  except (DiscoveryError, ValueError, requests.RequestException) as e:
    click.echo(presenter.present_error(e), err=True)
    raise click.exceptions.Exit(1) from e
