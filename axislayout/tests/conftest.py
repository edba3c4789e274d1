"""
Shared pytest fixtures for AxisLayout tests

Supports both development mode (pytest from the repository root) and
installed mode (pip install -e .)
"""
import pytest
from pathlib import Path
import sys

# Structure:
#   repo root/              <- added to sys.path
#   └── axislayout/         <- package
#       └── tests/
#           └── conftest.py <- we are here
REPO_ROOT = Path(__file__).parent.parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from axislayout import Layout  # noqa: E402


@pytest.fixture
def hello_layout():
    """Two elements weighted 5 and 10 over length 30, unresolved"""
    return (
        Layout.create("hello", 30.0)
        .add_element("Element Two", 5.0)
        .add_element("Element Three", 10.0)
    )


@pytest.fixture
def calendar_layout():
    """Calendar axis of length 150: margins of 15 around 120 for months, resolved"""
    return (
        Layout.create("calendar axis", 150.0)
        .add_element("left margin", 15.0)
        .add_element("months", 120.0)
        .add_element("right margin", 15.0)
        .resolve()
    )


@pytest.fixture
def chart_layout():
    """Horizontal chart axis of width 800 with five uneven elements, resolved"""
    return (
        Layout.create("chart horizontal", 800)
        .add_element("left margin", 2.0)
        .add_element("y axis title", 10.0)
        .add_element("y axis labels", 20.0)
        .add_element("plot area", 75.0)
        .add_element("right margin", 2.0)
        .resolve()
    )


@pytest.fixture
def element_file(tmp_path):
    """Element table on disk matching the calendar axis"""
    path = tmp_path / "elements.tsv"
    path.write_text(
        "name\trelative_length\n"
        "left margin\t15\n"
        "months\t120\n"
        "right margin\t15\n"
    )
    return path


# Pytest configuration
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual functions"
    )
    config.addinivalue_line(
        "markers", "integration: Tests running the command-line interface end to end"
    )
