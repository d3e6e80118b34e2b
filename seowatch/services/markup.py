"""Extraction of SEO-relevant tags from rendered HTML."""

from typing import List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from seowatch.services.urls import LinkRecord


def parse(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def _attr(soup: BeautifulSoup, selector: str, name: str) -> Optional[str]:
    node = soup.select_one(selector)
    if node is None or node.get(name) is None:
        return None
    return str(node[name])


def find_canonical(soup: BeautifulSoup) -> Optional[str]:
    """Return the href of ``<link rel="canonical">``, or *None* if absent."""
    return _attr(soup, 'link[rel="canonical"]', "href")


def find_html_lang(soup: BeautifulSoup) -> Optional[str]:
    return _attr(soup, "html", "lang")


def find_alternate(soup: BeautifulSoup, hreflang: str) -> Optional[str]:
    """Return the href of the hreflang alternate for *hreflang*, or *None*."""
    return _attr(soup, f'link[rel="alternate"][hreflang="{hreflang}"]', "href")


def find_meta_contents(soup: BeautifulSoup, tag: str) -> List[str]:
    """Return the ``content`` of every meta element declaring *tag*.

    Open Graph tags (``og:*``) are matched on ``property``, everything else
    (Twitter cards, robots, …) on ``name``.  Elements without ``content``
    contribute an empty string so callers can still count them.
    """
    attr = "property" if tag.startswith("og:") else "name"
    return [str(meta.get("content", "")) for meta in soup.select(f'meta[{attr}="{tag}"]')]


def find_favicon(soup: BeautifulSoup) -> Optional[str]:
    """Return the href of the first icon link (``icon`` or ``shortcut icon``)."""
    return _attr(soup, 'link[rel="icon"], link[rel="shortcut icon"]', "href")


def find_footer_links(soup: BeautifulSoup, base_url: str) -> List[LinkRecord]:
    """Return a :class:`LinkRecord` for every anchor inside ``<footer>``.

    Hrefs are resolved against *base_url* the way a browser resolves
    ``a.href``; anchors without an href yield an empty string.
    """
    links: List[LinkRecord] = []
    for anchor in soup.select("footer a"):
        href = anchor.get("href")
        resolved = urljoin(base_url, str(href).strip()) if href is not None else ""
        links.append(LinkRecord(text=anchor.get_text().strip(), href=resolved.strip()))
    return links
