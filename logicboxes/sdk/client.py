"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
LogicBoxes SDK, a product of Garudex Labs

LogicBoxes SDK Client.

Quick start::

    async with LogicBoxesClient(reseller_id="123456", api_key="...") as client:
        promos = await client.pricing.get_promo_prices()

From a config file::

    client = LogicBoxesClient.from_config("~/.logicboxes/config.yaml")
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from logicboxes.config.settings import LogicBoxesConfig, ResellerConfig, load_config
from logicboxes.logging_config import get_logger, setup_logging
from logicboxes.sdk.adapters.base import BaseAdapter
from logicboxes.sdk.api import ApiCore
from logicboxes.sdk.customers import CustomerOperations
from logicboxes.sdk.domains import DomainOperations
from logicboxes.sdk.pricing import PricingOperations

logger = get_logger(__name__)


class LogicBoxesClient:
    """SDK client for the reseller HTTP API.

    Args:
        reseller_id: Reseller account ID (sent as ``auth-userid``).
        api_key: Reseller API key.
        is_production: Use the production host instead of the test host.
        adapter: Optional custom transport adapter.
        timeout: Request timeout in seconds for the default adapter.

    Raises:
        SDKConfigurationError: If credentials are missing
    """

    def __init__(
        self,
        reseller_id: str,
        api_key: str,
        is_production: bool = False,
        adapter: Optional[BaseAdapter] = None,
        timeout: int = 30,
    ) -> None:
        config = ResellerConfig(
            reseller_id=reseller_id,
            api_key=api_key,
            is_production=is_production,
            timeout=timeout,
        )
        self._core = ApiCore(config, adapter)
        self.customers = CustomerOperations(self._core)
        self.domains = DomainOperations(self._core)
        self.pricing = PricingOperations(self._core)
        logger.info("LogicBoxes client initialized", is_production=is_production)

    @classmethod
    def from_config(
        cls,
        config_path: Optional[str] = None,
        adapter: Optional[BaseAdapter] = None,
        configure_logging: bool = False,
    ) -> "LogicBoxesClient":
        """Build a client from a YAML config file (see ``load_config``)."""
        config: LogicBoxesConfig = load_config(config_path)
        if configure_logging:
            setup_logging(
                level=config.logging.level,
                log_file=Path(config.logging.file) if config.logging.file else None,
                json_format=config.logging.json_format,
            )
        return cls(
            reseller_id=config.reseller.reseller_id,
            api_key=config.reseller.api_key,
            is_production=config.reseller.is_production,
            adapter=adapter,
            timeout=config.reseller.timeout,
        )

    @property
    def core(self) -> ApiCore:
        return self._core

    @property
    def is_production(self) -> bool:
        return self._core.is_production

    async def close(self) -> None:
        await self._core.aclose()

    async def __aenter__(self) -> "LogicBoxesClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
