"""CLI entrypoint for api-discovery-client."""
from __future__ import annotations

import sys
from pathlib import Path

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from apidiscovery.adapters.input.cli.cli_adapter import CLIAdapter
from apidiscovery.adapters.presentation.json_presenter import JsonPresenter
from apidiscovery.adapters.presentation.markdown_presenter import MarkdownPresenter
from apidiscovery.adapters.presentation.text_presenter import TextPresenter
from apidiscovery.common.config import get_settings
from apidiscovery.common.container import create_discovery_service
from apidiscovery.common.logging_config import configure_logging


def main() -> None:
  configure_logging(get_settings().log_level)
  discovery_service = create_discovery_service()
  presenters = {
    'text': TextPresenter(),
    'json': JsonPresenter(),
    'markdown': MarkdownPresenter(),
  }
  CLIAdapter(discovery_service, presenters).run()


if __name__ == '__main__':
  main()
