"""Fixtures for the example apps.

Each example directory holds an ``app.py`` next to its ``test_app.py``.
``example_app`` loads that file the way ``wren check path/to/app.py``
does, once per test, so no test sees an app another test already froze.
"""

from pathlib import Path

import pytest

from wren.app import App
from wren.cli._resolve import resolve_app


@pytest.fixture
def example_app(request: pytest.FixtureRequest) -> App:
    return resolve_app(str(Path(request.path).parent / "app.py"))
