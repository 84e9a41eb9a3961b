# services/roster-api/app/core/config.py
import os

from dotenv import load_dotenv

# ---------- env ----------
load_dotenv()  # loads services/roster-api/.env when run from that working dir

# Published Google Sheet (File > Share > Publish to web > CSV)
SHEET_CSV_URL = os.getenv(
    "SHEET_CSV_URL",
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vTmDS8gf3encx-azPIcKctt45iH7VqjD-9QDN4kM7kvT5ixvlBzbxMZPC12w4bmATSgXF_QoTRQlVbf"
    "/pub?output=csv",
)
SHEET_TIMEOUT = float(os.getenv("SHEET_TIMEOUT", "10"))

# Header row of the sheet:
# ID 角色名字 屬性 HP MP 物理攻擊 物理訪愈 魔法攻擊 魔法防禦 價值 角色種類 圖片連結 簡述
# These must match the header cells exactly.
MAGIC_KEY = os.getenv("MAGIC_KEY", "魔法攻擊")
PHYSICAL_KEY = os.getenv("PHYSICAL_KEY", "物理攻擊")
VALUE_KEY = os.getenv("VALUE_KEY", "價值")

TOP_K = int(os.getenv("TOP_K", "5"))

# Comma-separated list of origins, or "*" for any
FRONTEND_ORIGIN = os.getenv("FRONTEND_ORIGIN", "*")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def cors_origins(raw: str = FRONTEND_ORIGIN) -> list:
    """Split FRONTEND_ORIGIN into a list, e.g. "https://a.app,https://b.app"."""
    return [o.strip() for o in (raw or "*").split(",") if o.strip()] or ["*"]
