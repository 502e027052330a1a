"""Content API configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, optional_float_env_var, require_env_vars
from .http_client import HttpClientConfig, RateLimit

CONTENT_API_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class ContentApiConfig:
    """Holds the Content API address, credential and client settings."""

    base_url: str
    token: str
    assets_base_url: str
    http: HttpClientConfig


def build_http_config(
    *,
    base_url: str,
    token: str,
    timeout_seconds: float = CONTENT_API_TIMEOUT_SECONDS,
    ratelimit: RateLimit | None = None,
) -> HttpClientConfig:
    return HttpClientConfig(
        name="content-api",
        base_url=base_url.rstrip("/"),
        timeout_seconds=timeout_seconds,
        ratelimit=ratelimit,
        default_headers={
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
        },
    )


def get_content_api_config(*, ratelimit: RateLimit | None = None) -> ContentApiConfig:
    values = require_env_vars(("CONTENT_API_URL", "CONTENT_API_TOKEN"))
    base_url = values["CONTENT_API_URL"].rstrip("/")
    token = values["CONTENT_API_TOKEN"]
    assets_base_url = optional_env_var("CONTENT_ASSETS_URL", base_url) or base_url
    return ContentApiConfig(
        base_url=base_url,
        token=token,
        assets_base_url=assets_base_url.rstrip("/"),
        http=build_http_config(
            base_url=base_url,
            token=token,
            timeout_seconds=optional_float_env_var(
                "CONTENT_API_TIMEOUT", CONTENT_API_TIMEOUT_SECONDS
            ),
            ratelimit=ratelimit,
        ),
    )
