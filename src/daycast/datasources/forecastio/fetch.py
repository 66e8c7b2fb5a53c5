"""Retrieve and decode forecast.io responses."""

from __future__ import annotations

import os
from datetime import UTC, datetime, tzinfo
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import requests

from daycast.datasources.forecastio.models import ForecastResponse
from daycast.errors import FetchError
from daycast.logging_config import get_logger
from daycast.services.http import DEFAULT_TIMEOUT, session

logger = get_logger(__name__)

LOCALTIME_PATH = Path("/etc/localtime")


def local_timezone() -> tzinfo:
    """
    The caller's local time zone, with its DST rules where they can be found.

    Tries ``$TZ``, then the system zone file, then the current fixed UTC
    offset, then UTC.
    """
    name = os.getenv("TZ", "").lstrip(":")
    if name:
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            logger.debug("TZ=%r is not an IANA zone name", name)

    try:
        with LOCALTIME_PATH.open("rb") as f:
            return ZoneInfo.from_file(f, key="localtime")
    except (OSError, ValueError):
        logger.debug("No usable zone file at %s", LOCALTIME_PATH)

    return datetime.now().astimezone().tzinfo or UTC


def resolve_timezone(name: str | None, fallback: tzinfo) -> tzinfo:
    """
    Look up the IANA zone a response names.

    Args:
        name: Zone identifier from the response, e.g. ``"Europe/Berlin"``.
        fallback: Zone to keep when ``name`` is missing or unknown.
    """
    if name is None:
        logger.warning("No timezone set in response, using %s", fallback)
        return fallback
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        logger.warning("Unknown timezone %r in response, using %s", name, fallback)
        return fallback


def fetch_response(
    url: str,
    *,
    debug: bool = False,
    log_url: str | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> ForecastResponse:
    """
    GET a forecast.io URL and decode the body.

    Args:
        url: Full request URL (contains the API key).
        debug: Log the raw response body.
        log_url: URL to show in logs and errors instead of ``url``.
        timeout: Seconds to wait for the provider.

    Raises:
        FetchError: On transport errors, non-200 status or a malformed body.
    """
    shown = log_url or url
    logger.debug("GET %s", shown)
    try:
        resp = session.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise FetchError(f"Unable to get ({shown}): {e}", url=shown) from e

    if resp.status_code != 200:
        raise FetchError(f"Unable to get ({shown}): http status {resp.status_code}", url=shown)

    if debug:
        logger.debug("Response (%s): %s", shown, resp.text)

    try:
        body: Any = resp.json()
        if not isinstance(body, dict):
            raise ValueError(f"expected a JSON object, got {type(body).__name__}")
        return ForecastResponse.from_dict(body)
    except ValueError as e:
        raise FetchError(
            f"Unable to unmarshal response ({shown}): {e}\nThe json body is: {resp.text}",
            url=shown,
        ) from e
