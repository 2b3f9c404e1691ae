import re

from adsense_auditor.audit.rules import (
    AD_UNIT_THRESHOLD,
    count_ad_units,
    recommendations,
    run_checks,
)
from adsense_auditor.models.schema import AuditChecks, AuditReport, PageInfo

TITLE_PATTERN = re.compile(r"<title[^>]*>([^<]*)</title>", re.I)


def extract_title(markup: str) -> str:
    match = TITLE_PATTERN.search(markup)
    return match.group(1).strip() if match else ""


def analyze_html(markup: str, base_url: str = "") -> AuditReport:
    """
    Inspect raw HTML for common AdSense readiness issues.

    Pure function: no I/O, and any string (including an empty one) yields an
    ``ok`` report. ``base_url`` is accepted so callers can pass the page
    location along; the checks themselves do not use it yet.
    """
    lower = markup.lower()
    flags = run_checks(lower)
    flags["too_many_ads"] = count_ad_units(lower) > AD_UNIT_THRESHOLD
    checks = AuditChecks(**flags)
    return AuditReport(
        ok=True,
        page=PageInfo(title=extract_title(markup), length=len(markup)),
        checks=checks,
        notes=recommendations(flags),
    )
