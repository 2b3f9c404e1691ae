import re

# Substring patterns, no word boundaries: partial-word hits ("escortment")
# are accepted. Passing them does not mean the page is policy compliant.
BANNED_PATTERN = re.compile(r"(porn|xxx|sex\s?cam|escort|casino|betting|gambl)", re.I)
ADSENSE_SCRIPT_PATTERN = re.compile(r"(adsbygoogle|adsense|pagead/js)", re.I)
PRIVACY_PATTERN = re.compile(r"privacy\s+policy", re.I)
CONTACT_PATTERN = re.compile(r"contact(\s+us)?", re.I)

AD_UNIT_MARKER = "adsbygoogle"
AD_UNIT_THRESHOLD = 3
ADS_TXT_MARKER = "ads.txt"

SMOKE_TEST_NOTE = (
    "This is a smoke test. Extend with layout analysis and more specific AdSense policies."
)


def run_checks(lower: str) -> dict:
    """Evaluate the fixed text checks against an already lower-cased document."""
    return {
        "banned_content": bool(BANNED_PATTERN.search(lower)),
        "adsense_script_present": bool(ADSENSE_SCRIPT_PATTERN.search(lower)),
        "privacy_policy_present": bool(PRIVACY_PATTERN.search(lower)),
        "contact_info_present": bool(CONTACT_PATTERN.search(lower)),
        "ads_txt_referenced": ADS_TXT_MARKER in lower,
    }


def count_ad_units(lower: str) -> int:
    return lower.count(AD_UNIT_MARKER)


def recommendations(checks: dict) -> list[str]:
    notes = []
    if checks.get("banned_content"):
        notes.append("Remove adult or gambling content before applying for AdSense.")
    if not checks.get("privacy_policy_present"):
        notes.append("Add a privacy policy page.")
    if not checks.get("contact_info_present"):
        notes.append("Add contact information or a contact page.")
    if checks.get("too_many_ads"):
        notes.append("Reduce the number of ad units on the page.")
    if not checks.get("ads_txt_referenced"):
        notes.append("Reference your ads.txt file; none was found in the page markup.")
    if not notes:
        notes.append("No obvious policy issues found.")
    notes.append(SMOKE_TEST_NOTE)
    return notes
