"""
Pytest configuration for unit tests.

Provides fixtures and mocks that apply to all unit tests.
"""

import pytest
from unittest.mock import patch

from doomsday_clock.config import reset_app_config


SAMPLE_PAGE = """<!DOCTYPE html>
<html>
<head><title>Doomsday Clock - Wikipedia</title></head>
<body>
<h2 id="History">History</h2>
<table class="wikitable">
  <tr><th>Other</th><th>Table</th></tr>
  <tr><td>1900</td><td>5</td></tr>
</table>
<p>The clock has been set backward and forward 25 times.</p>
<table class="wikitable sortable">
<caption>Timeline of the Doomsday Clock<sup class="reference"><a href="#cite_note-1">[1]</a></sup></caption>
<tbody>
<tr>
  <th>Year</th><th>Minutes to midnight</th><th>Time (24-h)</th><th>Change (minutes)</th><th>Reason</th>
</tr>
<tr><td>1947</td><td>7</td><td>23:53</td><td>&#8212;</td><td>The initial setting &amp; origin</td></tr>
<tr><td>1949</td><td>3</td><td>23:57</td><td>&#8722;4</td><td>First Soviet atomic bomb test</td></tr>
<tr><td><a href="/wiki/1991">1991</a></td><td>17</td><td>23:43</td><td>+7</td><td>Strategic Arms Reduction Treaty</td></tr>
<tr><td>2018</td><td>2</td><td>23:58</td><td>&#8722;1/2</td><td>Nuclear rhetoric</td></tr>
<tr><td>2020</td><td>1+2&#8260;3<br>(100&nbsp;s)</td><td>23:58:20</td><td>&#8722;1/3</td><td>Information warfare</td></tr>
<tr><td>2023</td><td>1+1&#8260;2 (90 s)</td><td>23:58:30</td><td>&#8722;1/6</td><td>Russian invasion of Ukraine</td></tr>
<tr><td>2025</td><td>1+5&#8260;12(89 s)</td><td>23:58:31</td><td>&#8722;1/60</td><td>Continued risks</td></tr>
<tr><td colspan="5">&nbsp;</td></tr>
</tbody>
</table>
<p>See also</p>
</body>
</html>
"""


def make_page(rows_html: str, caption: str = "Timeline of the Doomsday Clock") -> str:
    """Wrap table rows in a minimal page with the marker caption."""
    return (
        "<html><body><table>"
        f"<caption>{caption}</caption>"
        f"{rows_html}"
        "</table></body></html>"
    )


@pytest.fixture
def page_factory():
    """Factory wrapping table rows in a page carrying the marker caption."""
    return make_page


@pytest.fixture
def sample_page():
    """Page with a realistic timeline table (7 valid rows)."""
    return SAMPLE_PAGE


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """
    Run every unit test with default configuration in a scratch directory.

    Clears DOOMSDAY_* variables, moves away from any .env file, and drops
    the cached config singleton before and after the test.
    """
    import os

    for name in list(os.environ):
        if name.upper().startswith('DOOMSDAY_'):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)

    reset_app_config()
    yield
    reset_app_config()


@pytest.fixture(autouse=True)
def block_network():
    """
    Prevent unit tests from reaching the live page.

    Tests exercising the fetcher install their own patch on top of this one.
    """
    with patch(
        'doomsday_clock.services.fetcher.requests.get',
        side_effect=AssertionError("Unit tests must not make HTTP requests")
    ) as mock_get:
        yield mock_get
