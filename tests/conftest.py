from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, cast

import httpx
import pytest

from coursehub.adapters.content_api import CmsGateway, ContentApiClient
from coursehub.config import ContentApiConfig, build_http_config

if TYPE_CHECKING:
    from collections.abc import Callable

DATA_DIR = Path(__file__).resolve().parent / "data" / "content_api"

type Record = dict[str, object]
type Handler = Callable[[httpx.Request], httpx.Response]


def load_fixture(name: str) -> object:
    with (DATA_DIR / name).open(encoding="utf-8") as handle:
        return json.load(handle)


@pytest.fixture
def user_record() -> Record:
    return cast(Record, load_fixture("user.json"))


@pytest.fixture
def group_record() -> Record:
    return cast(Record, load_fixture("group.json"))


@pytest.fixture
def topic_records() -> list[Record]:
    return cast(list[Record], load_fixture("topics.json"))


@pytest.fixture
def content_api_config() -> ContentApiConfig:
    return ContentApiConfig(
        base_url="https://cms.example.test",
        token="secret-token",
        assets_base_url="https://cms.example.test",
        http=build_http_config(base_url="https://cms.example.test", token="secret-token"),
    )


@pytest.fixture
def make_gateway(
    content_api_config: ContentApiConfig,
) -> Callable[[Handler], CmsGateway]:
    def factory(handler: Handler) -> CmsGateway:
        client = ContentApiClient.from_config(
            content_api_config, transport=httpx.MockTransport(handler)
        )
        return CmsGateway(client, assets_base_url=content_api_config.assets_base_url)

    return factory
