# services/roster-api/app/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from app.api.v1 import sheets
from app.core.config import LOG_LEVEL, cors_origins

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = FastAPI(title="Roster API", version="0.1.0")

# FRONTEND_ORIGIN="https://roster-ui.onrender.com,https://www.mycustomdomain.com"
origins = cors_origins()

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    # browsers refuse credentials together with a wildcard origin
    allow_credentials="*" not in origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

INDEX_HTML = """
<h2>Available APIs</h2>
<ul>
  <li><a href="/api/sheet-data" target="_blank">GET /api/sheet-data</a> - all rows of the sheet</li>
  <li><a href="/api/top-characters?type=magic" target="_blank">GET /api/top-characters?type=magic</a> - top 5 by magic attack (ties: higher value first)</li>
  <li><a href="/api/top-characters?type=physical" target="_blank">GET /api/top-characters?type=physical</a> - top 5 by physical attack (ties: higher value first)</li>
  <li><a href="/api/top-characters?type=value" target="_blank">GET /api/top-characters?type=value</a> - top 5 by value (ties: higher magic attack first)</li>
</ul>
<p>Roster API running.</p>
"""


@app.get("/", response_class=HTMLResponse)
def index():
    return INDEX_HTML


@app.get("/healthz")
def healthz():
    return {"ok": True}

# API routes; /api is the path existing clients call
app.include_router(sheets.router, prefix="/api", tags=["sheets"])
app.include_router(sheets.router, prefix="/api/v1", tags=["sheets"], include_in_schema=False)
