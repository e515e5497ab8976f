"""Elasticsearch provider — Registers the driver with the host's engine manager.

Called once during application startup::

    manager = EngineManager(default_driver=settings.driver)
    provider = ElasticsearchProvider(settings)
    provider.boot(manager, config_dir=Path("config"))
    engine = manager.engine("elasticsearch")
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import TYPE_CHECKING

from scout_elasticsearch.client import create_client
from scout_elasticsearch.config import DEFAULT_CONFIG_PATH
from scout_elasticsearch.config.settings import Settings
from scout_elasticsearch.engines.base.manager import EngineManager
from scout_elasticsearch.engines.elasticsearch.engine import ElasticsearchEngine

if TYPE_CHECKING:
    from elasticsearch import AsyncElasticsearch

logger = logging.getLogger(__name__)

DRIVER_NAME = "elasticsearch"
PUBLISHED_CONFIG_NAME = "scout-elasticsearch.yaml"


class ElasticsearchProvider:
    """Wires the Elasticsearch engine into an ``EngineManager``.

    Args:
        settings: Driver settings. Loaded from the environment if None.
        client: A pre-built client to inject into every engine. When
            omitted, one is created from ``settings`` on first resolution
            and owned by the provider.
    """

    def __init__(self, settings: Settings | None = None, client: AsyncElasticsearch | None = None) -> None:
        self.settings = settings or Settings()
        self._client = client
        self._owns_client = False

    def boot(self, manager: EngineManager, config_dir: str | Path | None = None, force: bool = False) -> None:
        """Publish the default config (when a directory is given) and register the driver."""
        if config_dir is not None:
            self.publish_config(config_dir, force=force)

        manager.extend(DRIVER_NAME, self._make_engine)

    def publish_config(self, config_dir: str | Path, force: bool = False) -> Path:
        """Copy the default configuration file into the host's config directory.

        An existing file is left untouched unless ``force`` is set.

        Returns:
            Path of the published file.
        """
        target = Path(config_dir) / PUBLISHED_CONFIG_NAME
        if target.exists() and not force:
            logger.info("Config already published, skipping: %s", target)
            return target

        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(DEFAULT_CONFIG_PATH, target)
        logger.info("Published config: %s", target)
        return target

    async def shutdown(self) -> None:
        """Close the client if this provider created it."""
        if self._client is not None and self._owns_client:
            await self._client.close()
            self._client = None
            self._owns_client = False

    def _make_engine(self, manager: EngineManager) -> ElasticsearchEngine:
        if self._client is None:
            self._client = create_client(self.settings.elasticsearch)
            self._owns_client = True
        return ElasticsearchEngine(self._client)
