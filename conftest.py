import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def pytest_addoption(parser):
    parser.addoption(
        "--e2e",
        action="store_true",
        default=False,
        help="Run the live UI/API suites against the conduit demo app",
    )


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config):
    config.addinivalue_line("markers", "e2e: live test against the conduit demo app (needs --e2e)")
    config.addinivalue_line("markers", "ui: browser-driven test")
    config.addinivalue_line("markers", "api: public REST API test")

    # JUNIT_FILE selects the JUnit XML report unless --junitxml was given
    junit_file = os.environ.get("JUNIT_FILE")
    if junit_file and not getattr(config.option, "xmlpath", None):
        config.option.xmlpath = junit_file


def pytest_collection_modifyitems(config, items):
    if config.getoption("--e2e"):
        return
    skip_e2e = pytest.mark.skip(reason="live suite, run with --e2e")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)
