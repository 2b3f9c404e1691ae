# app.py
import json
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from fastapi.staticfiles import StaticFiles

from adsense_auditor import config
from adsense_auditor.core.audit import audit_site
from adsense_auditor.core.utils import is_http_url
from adsense_auditor.models.schema import AuditRequest

# ---------- logging ----------
logging.basicConfig(level=config.LOG_LEVEL)
log = logging.getLogger("adsense-auditor")

# ---------- app ----------
app = FastAPI(title="AdSense Compliance Auditor", version="2.0.0")


def error_response(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"ok": False, "error": error})


# ---------- health endpoints ----------
@app.get("/healthz")
async def healthz():
    return Response(status_code=200)


@app.get("/health")
async def health_check():
    return {"status": "ok"}


# ---------- audit endpoint ----------
@app.post("/api/audit")
async def audit_endpoint(request: Request):
    try:
        payload = json.loads(await request.body() or b"{}")
    except ValueError:
        return error_response(400, "Invalid JSON body")

    # a non-object body (list, null, string) has no url
    audit_request = AuditRequest.model_validate(payload if isinstance(payload, dict) else {})

    url = audit_request.url
    if not is_http_url(url):
        return error_response(400, "Provide a valid http(s) URL in { url }")

    log.info("Audit requested for: %s", url)
    report = await audit_site(url)
    if report.ok:
        return JSONResponse(content=report.to_payload())

    status_code = 400 if report.error == "Invalid URL" else 502
    return JSONResponse(status_code=status_code, content=report.to_payload())


# ---------- static frontend (mounted last so API routes win) ----------
app.mount("/", StaticFiles(directory=config.PUBLIC_DIR, html=True), name="public")
