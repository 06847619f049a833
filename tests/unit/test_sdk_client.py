"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
LogicBoxes SDK, a product of Garudex Labs

Tests for the LogicBoxes SDK client.
"""

import pytest

from logicboxes.exceptions import InvalidConfigurationError, SDKConfigurationError
from logicboxes.sdk.adapters.base import SDKResponse
from logicboxes.sdk.adapters.mock import MockAdapter
from logicboxes.sdk.client import LogicBoxesClient
from logicboxes.sdk.customers import CustomerOperations
from logicboxes.sdk.domains import DomainOperations
from logicboxes.sdk.pricing import PricingOperations


class TestLogicBoxesClient:
    def test_operation_groups(self):
        client = LogicBoxesClient("123456", "key", adapter=MockAdapter())
        assert isinstance(client.customers, CustomerOperations)
        assert isinstance(client.domains, DomainOperations)
        assert isinstance(client.pricing, PricingOperations)
        assert client.is_production is False

    def test_missing_credentials(self):
        with pytest.raises(SDKConfigurationError):
            LogicBoxesClient("", "")

    @pytest.mark.asyncio
    async def test_async_context_manager_closes_adapter(self):
        adapter = MockAdapter({
            ("GET", "/products/promo-details.json"): SDKResponse(status_code=200, body={"promo": 1}),
        })
        async with LogicBoxesClient("123456", "key", adapter=adapter) as client:
            assert await client.pricing.get_promo_prices() == {"promo": 1}
            assert len(adapter.sent_requests) == 1
        assert adapter.sent_requests == []


class TestFromConfig:
    def test_from_yaml(self, temp_dir, monkeypatch):
        monkeypatch.setenv("TEST_LB_API_KEY", "from-env")
        config_file = temp_dir / "config.yaml"
        config_file.write_text(
            "reseller:\n"
            "  reseller_id: 654321\n"
            "  api_key: ${TEST_LB_API_KEY}\n"
            "  is_production: true\n"
            "  timeout: 10\n"
        )
        client = LogicBoxesClient.from_config(str(config_file))

        assert client.is_production is True
        assert client.core.adapter.base_url == "https://httpapi.com/api"

    @pytest.mark.asyncio
    async def test_credentials_reach_the_wire(self, temp_dir):
        config_file = temp_dir / "config.yaml"
        config_file.write_text("reseller:\n  reseller_id: '42'\n  api_key: abc\n")
        adapter = MockAdapter()
        client = LogicBoxesClient.from_config(str(config_file), adapter=adapter)

        await client.core.call_api("GET", "products", "promo-details")
        params = adapter.sent_requests[0].params
        assert params.get("auth-userid") == "42"
        assert params.get("api-key") == "abc"

    def test_missing_file_without_env_credentials(self, temp_dir, monkeypatch):
        monkeypatch.delenv("RESELLER_ID", raising=False)
        monkeypatch.delenv("API_KEY", raising=False)
        with pytest.raises(SDKConfigurationError):
            LogicBoxesClient.from_config(str(temp_dir / "missing.yaml"))

    def test_invalid_config(self, temp_dir):
        config_file = temp_dir / "config.yaml"
        config_file.write_text("reseller:\n  reseller_id: '1'\n  api_key: k\n  timeout: 0\n")
        with pytest.raises(InvalidConfigurationError):
            LogicBoxesClient.from_config(str(config_file))
