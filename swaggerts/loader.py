"""Fetch the resource listing and each API declaration it points to.

Every fetch goes through the JSON cache. Resources are fetched one at a
time in listing order; a failure stops the run with no retry.
"""

from __future__ import annotations

import json
import posixpath
from typing import Any, Iterator

import httpx

from .cache import JsonCache
from .errors import SchemaDecodeError
from .schema import Resource, ResourceRef, SchemaIndex, decode_index, decode_resource


def _decode_json(body: bytes, url: str) -> Any:
    try:
        return json.loads(body)
    except ValueError as exc:
        raise SchemaDecodeError(url, f"invalid JSON: {exc}") from exc


def fetch_json(url: str, cache: JsonCache, client: httpx.Client) -> Any:
    """Return the decoded JSON at a URL, served from cache when present."""
    cached = cache.read(url)
    if cached is not None:
        return _decode_json(cached, url)

    print(f"Request {url}")
    response = client.get(url)
    response.raise_for_status()

    # Decode before caching so a malformed body is never stored
    data = _decode_json(response.content, url)
    cache.write(url, response.content)
    return data


def resource_url(index: SchemaIndex, ref: ResourceRef, root_url: str) -> str:
    """Resolve a listing entry against the listing's basePath."""
    prefix = index.base_path if index.base_path is not None else root_url.rstrip("/")
    return prefix + ref.path


def _fallback_resource_path(ref: ResourceRef) -> str:
    return posixpath.splitext(ref.path)[0]


def iter_resources(
    root_url: str,
    cache: JsonCache,
    client: httpx.Client,
) -> Iterator[Resource]:
    """Yield each resource of the listing at root_url, fetched lazily."""
    index = decode_index(fetch_json(root_url, cache, client), root_url)

    for ref in index.apis:
        print(f'Get schema for "{ref.description or ref.path}"')
        url = resource_url(index, ref, root_url)
        resource = decode_resource(fetch_json(url, cache, client), url)
        if not resource.resource_path:
            resource = resource.model_copy(
                update={"resource_path": _fallback_resource_path(ref)}
            )
        yield resource


def load(root_url: str, cache: JsonCache, client: httpx.Client) -> list[Resource]:
    """Fetch every resource of the listing at root_url."""
    return list(iter_resources(root_url, cache, client))
