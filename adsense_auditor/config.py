# config.py
import os
from pathlib import Path

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 3000))

PUBLIC_DIR = os.getenv("PUBLIC_DIR", str(Path(__file__).parent / "public"))

# identifying UA sent with both the page fetch and the ads.txt probe
USER_AGENT = os.getenv("AUDIT_USER_AGENT", "AdsenseAuditor/2.0")
FETCH_TIMEOUT = float(os.getenv("FETCH_TIMEOUT", 20))  # seconds
MAX_BODY_BYTES = int(os.getenv("MAX_BODY_BYTES", 5_000_000))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
