"""
Shared HTTP client for weather providers.

Provider requests must fail fast: a failed request surfaces immediately as
an exception and nothing is retried.  Every request carries a timeout, either
the one the caller passes or the session default.

Usage::

    from daycast.services.http import DEFAULT_TIMEOUT, session

    resp = session.get(url, timeout=DEFAULT_TIMEOUT)
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from daycast import __version__

#: No retries; redirects are still followed.
NO_RETRY = Retry(total=0, redirect=5, raise_on_status=False)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = f"daycast/{__version__}"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = USER_AGENT,
) -> requests.Session:
    """
    Build a ``requests.Session`` for provider calls.

    Args:
        retry: Retry strategy (defaults to ``NO_RETRY``).
        timeout: Timeout for requests that do not pass their own.
        user_agent: ``User-Agent`` header sent with every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or NO_RETRY)
    for prefix in ("https://", "http://"):
        s.mount(prefix, adapter)
    s.headers["User-Agent"] = user_agent

    send = s.send

    def send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = timeout
        return send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = send_with_timeout  # type: ignore[method-assign]
    return s


#: Session used by the datasources.
session: requests.Session = create_session()
