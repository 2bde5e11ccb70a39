"""Pytest configuration and shared fixtures."""

import pytest
import os
import logging

from bs4 import BeautifulSoup

# Disable logging during tests to reduce noise
logging.disable(logging.CRITICAL)


@pytest.fixture(autouse=True)
def clean_env():
    """Clean environment variables before each test."""
    env_vars_to_clean = [
        "HTML_TABLE_CHARSET",
        "HTML_TABLE_TIMEOUT",
        "HTML_TABLE_USER_AGENT",
        "HTML_TABLE_PARSER",
        "LOG_LEVEL",
    ]

    original_values = {}
    for var in env_vars_to_clean:
        original_values[var] = os.environ.get(var)
        if var in os.environ:
            del os.environ[var]

    yield

    for var, value in original_values.items():
        if value is not None:
            os.environ[var] = value
        elif var in os.environ:
            del os.environ[var]


@pytest.fixture
def make_soup():
    """Parse an HTML string with the built-in parser."""

    def _make_soup(html):
        return BeautifulSoup(html, "html.parser")

    return _make_soup


@pytest.fixture
def write_html(tmp_path):
    """Write HTML to a temporary file and return its path as a string."""

    def _write_html(html, name="page.html", encoding="utf-8"):
        path = tmp_path / name
        path.write_bytes(html.encode(encoding))
        return str(path)

    return _write_html


HEADED_TABLE = """
<html><body>
<table id="people">
  <tr><th>Name</th><th>Age</th><th>City</th></tr>
  <tr><td>Alice</td><td>30</td><td>Paris</td></tr>
  <tr><td>Bob</td><td>25</td><td>Berlin</td></tr>
</table>
</body></html>
"""

HEADLESS_TABLE = """
<html><body>
<table>
  <tr><td>1</td><td>2</td><td>3</td></tr>
  <tr><td>4</td><td>5</td><td>6</td></tr>
</table>
</body></html>
"""

LAYOUT_AND_DATA = """
<html><body>
<table class="layout"><tr><td>menu</td></tr></table>
<table class="data">
  <tr><th>Sym</th><th>Price</th></tr>
  <tr><td>AAA</td><td>1.0</td></tr>
  <tr><td>BBB</td><td>2.0</td></tr>
  <tr><td>CCC</td><td>3.0</td></tr>
</table>
<table class="empty"></table>
</body></html>
"""


@pytest.fixture
def headed_html():
    """Document with one table whose first row holds header cells."""
    return HEADED_TABLE


@pytest.fixture
def headless_html():
    """Document with one table that has no header cells."""
    return HEADLESS_TABLE


@pytest.fixture
def layout_html():
    """Document mixing a layout table, a data table and an empty table."""
    return LAYOUT_AND_DATA


# Pytest configuration
def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
