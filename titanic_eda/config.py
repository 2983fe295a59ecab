import os

# ── Server ────────────────────────────────────────────────────────────────────
HOST         = os.environ.get("HOST", "0.0.0.0")
PORT         = int(os.environ.get("PORT", "8080"))
CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL    = os.environ.get("LOG_LEVEL", "INFO").upper()

# ── Data ──────────────────────────────────────────────────────────────────────
PREVIEW_ROWS  = int(os.environ.get("PREVIEW_ROWS", "5"))
MAX_UPLOAD_MB = float(os.environ.get("MAX_UPLOAD_MB", "20"))
