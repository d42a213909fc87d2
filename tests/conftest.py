"""Shared pytest configuration.

Live scenarios are marked ``e2e`` and only run with ``--run-e2e`` or
``SAUCE_RUN_E2E=true``; everything else runs offline against mocks.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from saucesuite.config.settings import configure_logging, get_config


def pytest_addoption(parser):
    parser.addoption(
        "--run-e2e",
        action="store_true",
        default=False,
        help="run live browser scenarios against the store",
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "e2e: live browser scenario against the store")
    configure_logging(get_config().log_level)


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-e2e") or get_config().run_e2e:
        return

    skip_e2e = pytest.mark.skip(reason="needs --run-e2e or SAUCE_RUN_E2E=true")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)
