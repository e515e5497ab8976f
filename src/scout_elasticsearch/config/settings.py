"""Driver settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. Environment variables (SCOUT_ prefix)
  2. YAML config file (if specified)
  3. Default values
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, DotEnvSettingsSource, EnvSettingsSource


class ElasticsearchSettings(BaseModel):
    """Connection settings for the Elasticsearch cluster."""

    hosts: list[str] = Field(default_factory=lambda: ["http://localhost:9200"], description="Cluster node URLs")
    cloud_id: str | None = Field(default=None, description="Elastic Cloud deployment id; when set, hosts are ignored")
    username: str | None = Field(default=None, description="HTTP basic-auth username")
    password: str | None = Field(default=None, description="HTTP basic-auth password")
    api_key: str | None = Field(default=None, description="Encoded API key")
    verify_certs: bool = Field(default=True, description="Whether to verify TLS certificates")
    request_timeout: float = Field(default=10.0, gt=0, description="Per-request timeout in seconds")
    max_retries: int = Field(default=3, ge=0, description="Retries on connection errors")
    retry_on_timeout: bool = Field(default=False, description="Also retry requests that timed out")
    index_settings: dict[str, Any] = Field(
        default_factory=dict,
        description=(
            "Per-index settings and mappings, keyed by index name. Not read by the engine, "
            "which does not create indices; kept for host tooling that provisions them"
        ),
    )

    @field_validator("hosts", mode="before")
    @classmethod
    def _parse_hosts(cls, v: Any) -> list[str]:
        """Parse hosts from JSON string (env var), comma list, or list."""
        if v is None:
            return []
        if isinstance(v, str):
            import json

            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return [str(h) for h in parsed]
            except (json.JSONDecodeError, TypeError):
                pass
            return [h.strip() for h in v.split(",") if h.strip()]
        return list(v)

    @model_validator(mode="after")
    def _cloud_id_replaces_hosts(self) -> ElasticsearchSettings:
        if self.cloud_id:
            self.hosts = []
        return self


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root settings for the Elasticsearch driver.

    Nested settings use double underscores in environment variables.

    Example:
        SCOUT_DRIVER=elasticsearch
        SCOUT_ELASTICSEARCH__HOSTS='["https://es-1:9200", "https://es-2:9200"]'
        SCOUT_ELASTICSEARCH__API_KEY=...
    """

    model_config = {
        "env_prefix": "SCOUT_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    driver: str = Field(default="elasticsearch", description="Default engine driver name")
    elasticsearch: ElasticsearchSettings = Field(default_factory=ElasticsearchSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Values from the YAML file are used as defaults; environment variables
        and the `.env` file still take precedence, section by section.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        overrides = _deep_merge(DotEnvSettingsSource(cls)(), EnvSettingsSource(cls)())
        return cls(**_deep_merge(data, overrides))


def _deep_merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Merge ``overrides`` into ``base``, recursing into nested sections."""
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged
