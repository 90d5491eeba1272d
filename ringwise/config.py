"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

INSPIRE_COMMON_NAMESPACE = "http://inspire.ec.europa.eu/schemas/common/1.0"
INSPIRE_VS_NAMESPACE = "http://inspire.ec.europa.eu/schemas/inspire_vs/1.0"
INSPIRE_DLS_NAMESPACE = "http://inspire.ec.europa.eu/schemas/inspire_dls/1.0"


class Settings(BaseSettings):
    ringwise_log_level: str = "info"

    # GeoJSON output
    geojson_indent: int | None = None

    # Prefixes declared around embedded capabilities fragments
    capabilities_namespaces: dict[str, str] = {
        "inspire_common": INSPIRE_COMMON_NAMESPACE,
        "inspire_vs": INSPIRE_VS_NAMESPACE,
        "inspire_dls": INSPIRE_DLS_NAMESPACE,
    }

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
