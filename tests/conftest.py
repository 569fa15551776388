"""
Root Pytest Fixtures.

Shared fixtures available to all test types.
"""

import logging
from pathlib import Path

import pytest
import structlog

from curlkit.core.config import get_app_config


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _reset_global_state():
    """
    Clear cached configuration, logging handlers and bound context vars.

    setup_logging() attaches handlers to the root logger that may point at
    streams owned by an earlier test (e.g. a CliRunner capture).
    """
    get_app_config.cache_clear()
    yield
    get_app_config.cache_clear()
    structlog.contextvars.clear_contextvars()
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)


# =============================================================================
# Request File Fixtures
# =============================================================================


@pytest.fixture
def body_file(tmp_path: Path) -> Path:
    """A JSON request body."""
    path = tmp_path / "data.json"
    path.write_text('{"name": "test", "count": 3}\n', encoding="utf-8")
    return path


@pytest.fixture
def upload_file(tmp_path: Path) -> Path:
    """A small binary file to upload."""
    path = tmp_path / "document.pdf"
    path.write_bytes(b"%PDF-1.4\x00\x01\x02binary")
    return path


@pytest.fixture
def cookie_file(tmp_path: Path) -> Path:
    """A Netscape-format cookie jar."""
    path = tmp_path / "cookies.txt"
    path.write_text(
        "# Netscape HTTP Cookie File\n"
        "localhost\tFALSE\t/\tFALSE\t0\tPHPSESSID\tabc123\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def form_fields_file(tmp_path: Path) -> Path:
    """Form field specs in curl's -F syntax."""
    path = tmp_path / "form_fields.txt"
    path.write_text("name=test\n", encoding="utf-8")
    return path
