import codecs
import logging
from dataclasses import dataclass

import httpx

from adsense_auditor import config
from .utils import ads_txt_url, default_headers

log = logging.getLogger("adsense-auditor")


@dataclass
class FetchedPage:
    html: str
    status_code: int
    truncated: bool = False


async def fetch_page(client: httpx.AsyncClient, url: str, max_bytes: int | None = None) -> FetchedPage:
    """
    GET *url* and decode the body, reading at most *max_bytes*.

    Transport errors propagate to the caller; a non-2xx status does not.
    """
    limit = config.MAX_BODY_BYTES if max_bytes is None else max_bytes
    body = bytearray()
    truncated = False
    async with client.stream("GET", url, headers=default_headers()) as r:
        async for chunk in r.aiter_bytes():
            body.extend(chunk)
            if len(body) > limit:
                truncated = True
                del body[limit:]
                break
        # a cut body may end mid-character; the decoder keeps that tail pending
        decoder = codecs.getincrementaldecoder(r.encoding or "utf-8")(errors="replace")
        html = decoder.decode(bytes(body), final=not truncated)
        status_code = r.status_code
    if truncated:
        log.warning("Body of %s truncated at %d bytes", url, limit)
    log.info("Fetched %s (status=%s, %d chars)", url, status_code, len(html))
    return FetchedPage(html=html, status_code=status_code, truncated=truncated)


async def probe_ads_txt(client: httpx.AsyncClient, url: str) -> bool:
    """True when ``<origin>/ads.txt`` answers with a 2xx status.

    Any failure reads as "missing", which also hides network errors from the
    report; only the log tells them apart from a real 404.
    """
    try:
        target = ads_txt_url(url)
        r = await client.get(target, headers=default_headers())
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
        log.warning("ads.txt probe failed for %s: %s", url, e)
        return False
    if not r.is_success:
        log.info("ads.txt probe for %s returned %s", url, r.status_code)
    return r.is_success
