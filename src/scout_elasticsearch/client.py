"""Client factory — Builds an ``AsyncElasticsearch`` handle from settings."""

from __future__ import annotations

import logging
from typing import Any

from elasticsearch import AsyncElasticsearch

from scout_elasticsearch.config.settings import ElasticsearchSettings
from scout_elasticsearch.engines.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def client_kwargs(settings: ElasticsearchSettings) -> dict[str, Any]:
    """Translate connection settings into ``AsyncElasticsearch`` keyword arguments.

    ``cloud_id`` takes precedence over ``hosts``.

    Raises:
        ConfigurationError: If neither ``hosts`` nor ``cloud_id`` is configured.
    """
    if not settings.cloud_id and not settings.hosts:
        raise ConfigurationError("Elasticsearch requires 'hosts' or 'cloud_id'.")

    kwargs: dict[str, Any] = {
        "verify_certs": settings.verify_certs,
        "request_timeout": settings.request_timeout,
        "max_retries": settings.max_retries,
        "retry_on_timeout": settings.retry_on_timeout,
    }
    if settings.cloud_id:
        kwargs["cloud_id"] = settings.cloud_id
    else:
        kwargs["hosts"] = settings.hosts

    if settings.api_key:
        kwargs["api_key"] = settings.api_key
    elif settings.username and settings.password:
        kwargs["basic_auth"] = (settings.username, settings.password)

    return kwargs


def create_client(settings: ElasticsearchSettings) -> AsyncElasticsearch:
    """Create an ``AsyncElasticsearch`` client for the configured cluster."""
    kwargs = client_kwargs(settings)
    client = AsyncElasticsearch(**kwargs)
    logger.info("Created Elasticsearch client for %s", settings.cloud_id or ", ".join(settings.hosts))
    return client
