from typing import Any, Dict, List, Optional

from pydantic import BaseModel, field_validator


class AuditRequest(BaseModel):
    url: Optional[str] = None

    @field_validator("url", mode="before")
    @classmethod
    def non_string_url_is_missing(cls, v):
        return v if isinstance(v, str) else None


class PageInfo(BaseModel):
    title: str = ""
    length: int = 0


class AuditChecks(BaseModel):
    banned_content: bool = False
    adsense_script_present: bool = False
    privacy_policy_present: bool = False
    contact_info_present: bool = False
    too_many_ads: bool = False
    ads_txt_referenced: bool = False
    ads_txt_exists: Optional[bool] = None  # only set after a live fetch


class AuditReport(BaseModel):
    ok: bool
    page: Optional[PageInfo] = None
    checks: Optional[AuditChecks] = None
    notes: Optional[List[str]] = None
    error: Optional[str] = None
    detail: Optional[str] = None

    @classmethod
    def failure(cls, error: str, detail: Optional[str] = None) -> "AuditReport":
        return cls(ok=False, error=error, detail=detail)

    def to_payload(self) -> Dict[str, Any]:
        """Plain dict for the JSON response; unset fields are dropped."""
        return self.model_dump(exclude_none=True)
