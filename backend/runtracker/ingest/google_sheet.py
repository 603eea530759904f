import re
from urllib.parse import parse_qs, urlparse


SHEET_ID_RE = re.compile(r"/spreadsheets/d/([a-zA-Z0-9-_]+)")


def sheet_url_to_csv_url(raw_url: str) -> str:
    """
    Turn a shareable Google Sheet link into its CSV export URL.

    Example:
      https://docs.google.com/spreadsheets/d/abc123/edit#gid=42
      -> https://docs.google.com/spreadsheets/d/abc123/export?format=csv&gid=42

    The tab id comes from `?gid=`, then `#gid=`, defaulting to the first tab.
    """
    url = urlparse((raw_url or "").strip())
    host = (url.hostname or "").removeprefix("www.")
    if host != "docs.google.com":
        raise ValueError("Use a docs.google.com Google Sheet URL.")

    match = SHEET_ID_RE.search(url.path)
    if not match:
        raise ValueError("Could not find the Google Sheet ID in the URL.")
    sheet_id = match.group(1)

    from_query = parse_qs(url.query).get("gid", [""])[0]
    from_hash = parse_qs(url.fragment).get("gid", [""])[0]
    gid = from_query or from_hash or "0"
    return f"https://docs.google.com/spreadsheets/d/{sheet_id}/export?format=csv&gid={gid}"
