"""
Loading of declaration source text from a local file or a URL.
"""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import urlparse

import requests

from .errors import SourceLoadError

logger = logging.getLogger(__name__)


def is_url(location: str | Path) -> bool:
    return isinstance(location, str) and urlparse(location).scheme in ("http", "https")


def load_source(location: str | Path, timeout: float = 30) -> str:
    """
    Read declaration source text.

    Args:
        location: Local path, or an http(s) URL
        timeout: Seconds to wait for a remote response

    Returns:
        The source text

    Raises:
        SourceLoadError: If the file cannot be read or the request fails
    """
    if is_url(location):
        logger.info("fetching %s", location)
        try:
            response = requests.get(location, timeout=timeout)
            # Raises an HTTPError if the response status code is 4XX/5XX
            response.raise_for_status()
        except requests.RequestException as e:
            raise SourceLoadError(f"cannot fetch {location}: {e}") from e
        return response.text

    try:
        return Path(location).read_text(encoding="utf-8")
    except OSError as e:
        raise SourceLoadError(f"cannot read {location}: {e}") from e
