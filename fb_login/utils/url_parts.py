# fb_login/utils/url_parts.py
from __future__ import annotations

from urllib.parse import parse_qs, urlparse


def _first_values(raw: str) -> dict[str, str]:
    q = parse_qs(raw, keep_blank_values=True)
    return {k: v[0] for k, v in q.items() if v}


def query_dict(url: str) -> dict[str, str]:
    return _first_values(urlparse(url).query)


def fragment_dict(url: str) -> dict[str, str]:
    return _first_values(urlparse(url).fragment)


def fragment_and_query_dict(url: str) -> dict[str, str]:
    """
    Fragment and query merged into one map. Query wins on duplicate keys.
    """
    out = fragment_dict(url)
    out.update(query_dict(url))
    return out


def url_scheme(url: str) -> str:
    return urlparse(url).scheme.lower()
