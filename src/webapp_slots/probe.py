import logging

import requests

logger = logging.getLogger(__name__)

MAX_BODY = 200


def check_address(url: str, timeout: float = 30.0) -> str:
    """
    GET ``url`` and return "<status> <body>" with the body cut to MAX_BODY chars.

    A freshly created site can take a while to answer, so transport errors
    are returned as text rather than raised.
    """
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        logger.debug(f"Probe of {url} failed", exc_info=True)
        return f"Could not reach {url}: {e}"

    body = resp.text.strip()
    if len(body) > MAX_BODY:
        body = body[:MAX_BODY] + "…"
    return f"{resp.status_code} {body}".rstrip()
