"""Sitemap parsing helpers."""

import re
from typing import Iterable, List

from seowatch.services.urls import normalize_url

# Tolerant scan: tag names in any case, optional whitespace before ">"
_LOC_PATTERN = re.compile(r"<loc\s*>(.*?)</loc\s*>", re.IGNORECASE | re.DOTALL)


def extract_loc_urls(xml_text: str) -> List[str]:
    """Return every ``<loc>`` value in *xml_text*, trimmed and normalised.

    The result keeps document order and is not deduplicated.  Text without
    any ``<loc>`` element yields an empty list.
    """
    return [normalize_url(match.strip()) for match in _LOC_PATTERN.findall(xml_text)]


def missing_urls(found: Iterable[str], required: Iterable[str]) -> List[str]:
    """Return the *required* URLs (normalised) that do not appear in *found*."""
    present = {normalize_url(url) for url in found}
    return [url for url in (normalize_url(r) for r in required) if url not in present]


def document_problems(xml_text: str) -> List[str]:
    """Return structural problems with a sitemap body (empty list when fine)."""
    if not xml_text:
        return ["Sitemap content is empty"]
    problems: List[str] = []
    if "<?xml" not in xml_text:
        problems.append("Sitemap is not valid XML (missing <?xml declaration)")
    if "<urlset" not in xml_text:
        problems.append("Sitemap is missing urlset")
    return problems
