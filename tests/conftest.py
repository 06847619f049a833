"""
Pytest configuration and shared fixtures for LogicBoxes SDK tests.
"""

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from logicboxes.config.settings import ResellerConfig
from logicboxes.sdk.adapters.mock import MockAdapter
from logicboxes.sdk.api import ApiCore


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.
    
    Yields:
        Path to temporary directory that is cleaned up after test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def reseller_config() -> ResellerConfig:
    """Test-host reseller credentials."""
    return ResellerConfig(reseller_id="123456", api_key="test-api-key")


@pytest.fixture
def mock_adapter() -> MockAdapter:
    """Adapter with no canned responses; tests register their own."""
    return MockAdapter()


@pytest.fixture
def api_core(reseller_config: ResellerConfig, mock_adapter: MockAdapter) -> ApiCore:
    """ApiCore wired to the mock adapter."""
    return ApiCore(reseller_config, adapter=mock_adapter)
