import re

import httpx

from adsense_auditor import config

HTTP_URL_PATTERN = re.compile(r"^https?://", re.I)


def default_headers():
    return {"User-Agent": config.USER_AGENT}


def is_http_url(url) -> bool:
    return isinstance(url, str) and bool(HTTP_URL_PATTERN.match(url))


def ads_txt_url(url: str) -> httpx.URL:
    """ads.txt location at the origin (scheme, host, port) of *url*."""
    page = httpx.URL(url)
    return httpx.URL(scheme=page.scheme, host=page.host, port=page.port, path="/ads.txt")
