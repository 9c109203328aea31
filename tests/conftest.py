import pytest

from tuningsearch_mcp.utils.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(tuningsearch_api_key="test-key", api_base_url="https://api.test")


@pytest.fixture
def settings_without_key() -> Settings:
    return Settings(tuningsearch_api_key=None, api_base_url="https://api.test")
