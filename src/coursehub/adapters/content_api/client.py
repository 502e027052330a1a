"""REST client for the Content API (Directus dialect)."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING, cast
from urllib.parse import quote

import httpx

from coursehub.adapters.http_client import ApiHttpClient
from coursehub.domain.ports import RecordNotFoundError

from .schema import ErrorResponse

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from coursehub.adapters.http_client import RequestOptions
    from coursehub.config.content_api import ContentApiConfig

log = getLogger(__name__)

type Record = dict[str, object]

# Directus answers 403 for items that do not exist, to avoid leaking their presence.
NOT_FOUND_STATUSES = frozenset({403, 404})


class ContentAPIError(RuntimeError):
    """Raised when a Content API round trip fails or returns an unusable payload."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code


class ContentNotFoundError(ContentAPIError, RecordNotFoundError):
    """Raised when the addressed record does not exist."""


def _error_message(response: httpx.Response) -> tuple[str, str | None]:
    try:
        payload = ErrorResponse.model_validate(response.json())
    except ValueError:
        return response.reason_phrase or f"HTTP {response.status_code}", None
    if not payload.errors:
        return response.reason_phrase or f"HTTP {response.status_code}", None
    first = payload.errors[0]
    return first.message, first.code


class ContentApiClient:
    """Low-level client: one method per REST verb, returning unwrapped ``data``."""

    def __init__(self, http: ApiHttpClient) -> None:
        self._http = http

    @classmethod
    def from_config(
        cls,
        config: ContentApiConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> ContentApiClient:
        return cls(ApiHttpClient(config.http, transport=transport))

    async def aclose(self) -> None:
        await self._http.aclose()

    async def read_user(self, user_id: str, *, fields: Sequence[str]) -> Record:
        data = await self._perform("GET", f"users/{quote(user_id, safe='')}", fields=fields)
        return self._expect_record(data)

    async def read_item(self, collection: str, key: str, *, fields: Sequence[str]) -> Record:
        data = await self._perform("GET", self._item_path(collection, key), fields=fields)
        return self._expect_record(data)

    async def read_items(
        self,
        collection: str,
        *,
        fields: Sequence[str],
        sort: Sequence[str] = (),
        filter: Mapping[str, object] | None = None,  # noqa: A002
        limit: int | None = None,
    ) -> list[Record]:
        params: dict[str, str] = {}
        if sort:
            params["sort"] = ",".join(sort)
        if filter:
            params["filter"] = json.dumps(filter, separators=(",", ":"))
        if limit is not None:
            params["limit"] = str(limit)
        data = await self._perform("GET", f"items/{collection}", fields=fields, params=params)
        if not isinstance(data, list):
            raise ContentAPIError(f"Expected a list of {collection} records")
        items = cast(list[object], data)
        if not all(isinstance(item, dict) for item in items):
            raise ContentAPIError(f"Unexpected {collection} record in list payload")
        return cast(list[Record], items)

    async def create_item(self, collection: str, values: Mapping[str, object]) -> None:
        await self._perform("POST", f"items/{collection}", body=dict(values))

    async def update_item(
        self, collection: str, key: str, values: Mapping[str, object]
    ) -> None:
        await self._perform("PATCH", self._item_path(collection, key), body=dict(values))

    async def delete_item(self, collection: str, key: str) -> None:
        await self._perform("DELETE", self._item_path(collection, key))

    @staticmethod
    def _item_path(collection: str, key: str) -> str:
        return f"items/{collection}/{quote(key, safe='')}"

    @staticmethod
    def _expect_record(data: object) -> Record:
        if not isinstance(data, dict):
            raise ContentAPIError("Expected a single record payload")
        return cast(Record, data)

    async def _perform(
        self,
        method: str,
        path: str,
        *,
        fields: Sequence[str] = (),
        params: Mapping[str, str] | None = None,
        body: Record | None = None,
    ) -> object:
        query: dict[str, str] = dict(params or {})
        if fields:
            query["fields"] = ",".join(fields)

        options: RequestOptions = {}
        if query:
            options["params"] = query
        if body is not None:
            options["json"] = body

        try:
            response = await self._http.request(method, path, **options)
        except httpx.HTTPError as exc:
            raise ContentAPIError(f"{method} {path} failed: {exc}") from exc

        if response.status_code in NOT_FOUND_STATUSES:
            message, code = _error_message(response)
            raise ContentNotFoundError(
                f"{method} {path}: {message}", status_code=response.status_code, code=code
            )
        if response.is_error:
            message, code = _error_message(response)
            log.error(f"Content API error {response.status_code} on {method} {path}: {message}")
            raise ContentAPIError(message, status_code=response.status_code, code=code)

        if response.status_code == httpx.codes.NO_CONTENT or not response.content:
            return None

        try:
            payload = response.json()
        except ValueError as exc:
            raise ContentAPIError(f"Malformed JSON from {method} {path}") from exc

        if not isinstance(payload, dict) or "data" not in payload:
            raise ContentAPIError("Unexpected Content API response payload")
        return cast(Record, payload)["data"]
