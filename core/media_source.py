import io
from typing import List, Optional

import pandas as pd
import requests

from core import config
from core.errors import DataSourceError, ValidationError
from core.log_utils import get_logger
from core.media import Media

logger = get_logger(__name__)

# Sample catalog shown when no MEDIA_CSV is configured.
SAMPLE_MEDIA = [
    {"id": 1, "title": "J52 Girls", "artist": "The B52's", "kind": "CD", "status": "obtained", "created_at": "2024-01-15"},
    {"id": 2, "title": "Baby", "artist": "Lil Baby", "kind": "Tape", "status": "wish_listed", "created_at": "2024-02-20"},
    {"id": 3, "title": "Bad Company", "artist": "Bad Company", "kind": "Record", "status": "obtained", "created_at": "2024-03-10"},
]


def _is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def _download_csv(url: str, timeout: int) -> bytes:
    """Fetch a CSV export (public link) into memory."""
    data = io.BytesIO()
    try:
        r = requests.get(url, stream=True, timeout=timeout)
        r.raise_for_status()
        for chunk in r.iter_content(chunk_size=1024 * 256):
            if chunk:
                data.write(chunk)
    except requests.RequestException as e:
        raise DataSourceError(f"Could not download media CSV: {e}", source=url) from e
    return data.getvalue()


def read_media_frame(source: str, timeout: Optional[int] = None) -> pd.DataFrame:
    """
    Read media rows from a CSV file path or an http(s) URL.
    Blank cells stay as NaN; Media.from_record treats them as missing.
    """
    try:
        if _is_url(source):
            raw = _download_csv(source, timeout or config.http_timeout())
            return pd.read_csv(io.BytesIO(raw))
        return pd.read_csv(source)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise DataSourceError(f"Could not read media CSV: {e}", source=source) from e


def media_from_frame(df: pd.DataFrame) -> List[Media]:
    items = []
    for row_no, record in enumerate(df.to_dict("records"), start=1):
        try:
            items.append(Media.from_record(record))
        except ValidationError as e:
            e.details["row"] = row_no
            e.message = f"row {row_no}: {e.message}"
            e.args = (e.message,)
            raise
    return items


def list_media(source: Optional[str] = None) -> List[Media]:
    """
    Single entry point for the page:
      - no source configured -> sample catalog
      - path / URL           -> CSV rows validated into Media
    """
    source = config.media_source() if source is None else source.strip()
    if not source:
        return [Media.from_record(r) for r in SAMPLE_MEDIA]

    df = read_media_frame(source)
    items = media_from_frame(df)
    logger.info(f"Loaded {len(items)} media rows from {source}")
    return items
