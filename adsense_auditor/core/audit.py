import logging

import httpx

from adsense_auditor import config
from adsense_auditor.models.schema import AuditReport
from .analyzer import analyze_html
from .fetchers import fetch_page, probe_ads_txt
from .utils import is_http_url

log = logging.getLogger("adsense-auditor")


async def audit_site(url: str, client: httpx.AsyncClient | None = None) -> AuditReport:
    """
    Fetch *url*, analyse its markup and check for ``<origin>/ads.txt``.

    Never raises for bad input or network trouble: an invalid URL or a failed
    page fetch comes back as an ``ok=False`` report.
    """
    if not is_http_url(url):
        return AuditReport.failure("Invalid URL")

    if client is None:
        async with httpx.AsyncClient(timeout=config.FETCH_TIMEOUT, follow_redirects=True) as client:
            return await _run_audit(client, url)
    return await _run_audit(client, url)


async def _run_audit(client: httpx.AsyncClient, url: str) -> AuditReport:
    # ValueError covers hosts httpx cannot IDNA-encode
    try:
        page = await fetch_page(client, url)
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
        log.warning("Fetch failed for %s: %s", url, e)
        return AuditReport.failure("Fetch failed", str(e) or type(e).__name__)

    report = analyze_html(page.html, url)
    if not 200 <= page.status_code < 300:
        report.notes.append(f"Page responded with HTTP {page.status_code}")
    if page.truncated:
        report.notes.append(f"Page body truncated at {config.MAX_BODY_BYTES} bytes")

    report.checks.ads_txt_exists = await probe_ads_txt(client, url)
    if not report.checks.ads_txt_exists:
        report.notes.append("No ads.txt file is served at the site root.")
    return report
