"""
Shared fixtures for the select menu tests.
"""

import logging
import pathlib

import pytest

from selectmenu import ChoiceItem, menu

log = logging.getLogger(__name__)


@pytest.fixture
def items30():
    """30 labeled choices: two pages at the default page size."""
    return [ChoiceItem(label=f"Item {i}", value=f"item-{i}") for i in range(1, 31)]


@pytest.fixture
def faults():
    """Collects whatever a menu passes to its fault sink (use faults.append as the sink)."""
    return []


# ===== Global Fixture =====
@pytest.fixture(autouse=True, scope="function")
def global_fixture(request):
    """Things to do before and after every test."""
    log.info(f"Starting test: {request.function.__name__}")
    yield
    # a failing test may leave its menu registered
    menu._active_control_ids.clear()
    log.info(f"Finished test: {request.function.__name__}")


# ==== marks ====
def pytest_collection_modifyitems(config, items):
    """
    mark every test in unit/ with the *unit* mark
    """
    rootdir = pathlib.Path(config.rootdir)
    for item in items:
        rel_path = pathlib.Path(item.fspath).relative_to(rootdir)
        if "unit" in rel_path.parts:
            item.add_marker(pytest.mark.unit)
