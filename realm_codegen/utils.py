"""Utility functions for loading GraphQL schemas.

This module provides functions for loading a schema from SDL or
introspection files and from live GraphQL endpoints, with proper error
handling and validation.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests
from graphql import (
    GraphQLError,
    GraphQLSchema,
    build_client_schema,
    build_schema,
    get_introspection_query,
)

from .logging_config import get_logger

logger = get_logger(__name__)

SDL_SUFFIXES = {".graphql", ".graphqls", ".gql"}


class SchemaLoaderError(Exception):
    """Custom exception for schema loading errors."""

    pass


def schema_from_introspection(data: Any, source: str) -> GraphQLSchema:
    """Build a schema from an introspection result.

    Accepts both the bare ``{"__schema": ...}`` form and the full
    ``{"data": {"__schema": ...}}`` response envelope.
    """
    if isinstance(data, dict) and "data" in data:
        data = data["data"]

    if not isinstance(data, dict) or "__schema" not in data:
        raise SchemaLoaderError(f"No __schema introspection result in {source}")

    try:
        return build_client_schema(data)
    except (GraphQLError, TypeError, KeyError) as e:
        raise SchemaLoaderError(f"Invalid introspection result in {source}: {e}") from e


def load_schema_from_file(file_path: str | Path) -> tuple[str, GraphQLSchema]:
    """Load a schema from a local SDL or introspection JSON file.

    Args:
        file_path: Path to a ``.graphql``/``.graphqls``/``.gql`` or ``.json`` file.

    Returns:
        Tuple of (source description, schema).

    Raises:
        FileNotFoundError: If file doesn't exist.
        SchemaLoaderError: If file cannot be read or does not hold a schema.
    """
    file_path = Path(file_path)
    logger.debug("Attempting to load schema from file: %s", file_path)

    if not file_path.exists():
        logger.error("File not found: %s", file_path)
        raise FileNotFoundError(f"File not found: {file_path}")

    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error reading file %s: %s", file_path, e, exc_info=True)
        raise SchemaLoaderError(f"Error reading file {file_path}: {e}") from e

    suffix = file_path.suffix.lower()
    source = f"📄 {file_path}"

    if suffix == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.error("Invalid JSON in file %s: %s", file_path, e)
            raise SchemaLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
        schema = schema_from_introspection(data, str(file_path))
    else:
        if suffix not in SDL_SUFFIXES:
            logger.warning("Treating %s as GraphQL SDL", file_path)
        try:
            schema = build_schema(text)
        except (GraphQLError, TypeError) as e:
            logger.error("Invalid GraphQL SDL in file %s: %s", file_path, e)
            raise SchemaLoaderError(f"Invalid GraphQL SDL in file {file_path}: {e}") from e

    logger.info("Successfully loaded schema from %s", file_path)
    return source, schema


def load_schema_from_url(
    url: str, timeout: int = 30, headers: dict[str, str] | None = None
) -> tuple[str, GraphQLSchema]:
    """Load a schema by running the introspection query against an endpoint.

    Args:
        url: GraphQL endpoint URL.
        timeout: Request timeout in seconds.
        headers: Extra request headers, e.g. authorization.

    Returns:
        Tuple of (source description, schema).

    Raises:
        SchemaLoaderError: If URL is invalid, request fails, or the response
            holds no usable introspection result.
    """
    logger.debug("Attempting to introspect schema from URL: %s", url)

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error("Invalid URL format: %s", url)
        raise SchemaLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.post(
            url,
            json={"query": get_introspection_query(descriptions=True)},
            headers=headers,
            timeout=timeout,
        )
        response.raise_for_status()
        payload = response.json()

    except requests.exceptions.Timeout as e:
        logger.error("Request timeout for URL: %s", url)
        raise SchemaLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error("Connection error for URL %s: %s", url, e)
        raise SchemaLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error("HTTP error %s for URL: %s", e.response.status_code, url)
        raise SchemaLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except ValueError as e:
        logger.error("Invalid JSON response from URL %s: %s", url, e)
        raise SchemaLoaderError(f"Invalid JSON response from URL {url}: {e}") from e
    except requests.exceptions.RequestException as e:
        logger.error("Request error for URL %s: %s", url, e, exc_info=True)
        raise SchemaLoaderError(f"Request error for URL {url}: {e}") from e

    if isinstance(payload, dict) and payload.get("errors"):
        messages = "; ".join(
            str(error.get("message", error)) if isinstance(error, dict) else str(error)
            for error in payload["errors"]
        )
        logger.error("Introspection failed for URL %s: %s", url, messages)
        raise SchemaLoaderError(f"Introspection failed for URL {url}: {messages}")

    schema = schema_from_introspection(payload, url)
    logger.info("Successfully introspected schema from %s", url)
    return f"🌐 {url}", schema


def load_schema(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, GraphQLSchema]:
    """Load a schema from either a file or URL.

    Args:
        file_path: Path to local schema file (mutually exclusive with url).
        url: GraphQL endpoint to introspect (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, schema).

    Raises:
        SchemaLoaderError: If neither or both parameters are provided, or loading fails.
        FileNotFoundError: If file doesn't exist.
    """
    if not file_path and not url:
        logger.error("Neither file_path nor url provided")
        raise SchemaLoaderError("Either file_path or url must be provided")

    if file_path and url:
        logger.error("Both file_path and url provided")
        raise SchemaLoaderError("Cannot specify both file_path and url")

    if file_path:
        return load_schema_from_file(file_path)
    return load_schema_from_url(url, timeout)
