# services/roster-api/app/serve/sheet_loader.py
from __future__ import annotations
import io
import logging
from typing import Dict, List, Optional

import httpx
import pandas as pd

from app.core.config import SHEET_CSV_URL, SHEET_TIMEOUT

logger = logging.getLogger(__name__)


class SheetError(Exception):
    """Base class for failures while loading the sheet."""


class SheetFetchError(SheetError):
    pass


class SheetParseError(SheetError):
    pass


class SheetLoader:
    """Downloads a published sheet as CSV and turns it into row dicts keyed by the header row."""

    def __init__(
        self,
        csv_url: str = SHEET_CSV_URL,
        timeout: float = SHEET_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.csv_url = csv_url
        self.timeout = timeout
        self._transport = transport

    async def fetch_text(self) -> str:
        try:
            # publish-to-web links answer with a redirect to the real CSV
            async with httpx.AsyncClient(
                timeout=self.timeout, follow_redirects=True, transport=self._transport
            ) as client:
                response = await client.get(self.csv_url)
        except httpx.HTTPError as e:
            raise SheetFetchError(f"download failed: {e}") from e

        if not response.is_success:
            raise SheetFetchError(f"download failed: HTTP {response.status_code}")
        return response.text

    async def fetch_rows(self) -> List[Dict[str, str]]:
        rows = parse_rows(await self.fetch_text())
        logger.info("fetched %d rows from sheet", len(rows))
        return rows


def parse_rows(text: str) -> List[Dict[str, str]]:
    """
    Parse CSV text into one dict per data row, keyed by the first row.

    Every cell stays a string; empty cells come back as "" rather than NaN,
    and blank lines are skipped. Rows with more cells than the header
    (the first data row included) raise SheetParseError; shorter rows are
    padded with "".
    """
    if not text.strip():
        return []
    try:
        # header=None keeps the header line in the tokenizer's field-count
        # check, so an extra cell on the first data row is not read as an index
        df = pd.read_csv(
            io.StringIO(text),
            header=None,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError:
        return []
    except pd.errors.ParserError as e:
        raise SheetParseError(f"CSV parse error: {e}") from e

    # short rows are padded with NaN even with keep_default_na=False
    df = df.fillna("")
    header = list(df.iloc[0])
    return [dict(zip(header, row)) for row in df.iloc[1:].itertuples(index=False, name=None)]
