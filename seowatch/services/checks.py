"""Check functions: compare extracted page data against expectations.

Every function is pure and returns a :class:`CheckResult`.  A missing tag or
attribute is reported exactly like a wrong value: as a failure detail.
"""

import re
from typing import Iterable, List, Optional, Sequence, Tuple

from bs4 import BeautifulSoup

from seowatch.models.check import CheckKind, CheckResult
from seowatch.services import markup
from seowatch.services.fetcher import FetchResult
from seowatch.services.robots import disallows_all
from seowatch.services.sitemap import document_problems, extract_loc_urls, missing_urls
from seowatch.services.urls import (
    LinkRecord,
    equivalent_link_sets,
    link_set_differences,
    urls_equal,
)

_ABSOLUTE_URL = re.compile(r"^https?://")


def _result(
    name: str,
    kind: CheckKind,
    url: str,
    details: List[str],
    warnings: Optional[List[str]] = None,
) -> CheckResult:
    return CheckResult(
        name=name,
        kind=kind,
        url=url,
        passed=not details,
        details=details,
        warnings=warnings or [],
    )


def _compare_urls(label: str, observed: Optional[str], expected: str) -> List[str]:
    if observed is None:
        return [f"{label} is missing (expected {expected})"]
    if not urls_equal(observed, expected):
        return [f"{label} is {observed!r}, expected {expected!r}"]
    return []


def check_canonical(name: str, url: str, soup: BeautifulSoup) -> CheckResult:
    details = _compare_urls("canonical link", markup.find_canonical(soup), url)
    return _result(name, "canonical", url, details)


def check_lang(name: str, url: str, soup: BeautifulSoup, locale: str) -> CheckResult:
    lang = markup.find_html_lang(soup)
    details: List[str] = []
    if lang is None:
        details.append(f"<html lang> is missing (expected {locale!r})")
    elif lang.lower() != locale:
        details.append(f"<html lang> is {lang!r}, expected {locale!r}")
    return _result(name, "lang", url, details)


def check_hreflang(
    name: str, url: str, soup: BeautifulSoup, locale: str, expected_href: str
) -> CheckResult:
    details = _compare_urls(
        f"hreflang={locale} alternate", markup.find_alternate(soup, locale), expected_href
    )
    return _result(name, "hreflang", url, details)


def check_meta_tags(
    name: str,
    url: str,
    soup: BeautifulSoup,
    required: Iterable[str],
    absolute_url_tags: Iterable[str] = (),
    allowed_og_types: Iterable[str] = (),
) -> CheckResult:
    """Each *required* tag must appear once with non-empty content.

    Tags in *absolute_url_tags* must hold an http(s) URL and ``og:type``
    must be one of *allowed_og_types* (compared case-insensitively).
    """
    absolute = set(absolute_url_tags)
    og_types = {t.lower() for t in allowed_og_types}
    details: List[str] = []

    for tag in required:
        contents = markup.find_meta_contents(soup, tag)
        if len(contents) != 1:
            details.append(f"meta {tag} appears {len(contents)} times, expected exactly 1")
            continue
        content = contents[0]
        if not content:
            details.append(f"meta {tag} has empty content")
            continue
        if tag in absolute and not _ABSOLUTE_URL.match(content):
            details.append(f"meta {tag} is {content!r}, expected an absolute http(s) URL")
        if tag == "og:type" and og_types and content.lower() not in og_types:
            details.append(f"meta og:type is {content!r}, expected one of {sorted(og_types)}")

    return _result(name, "meta_tags", url, details)


def check_favicon(name: str, url: str, soup: BeautifulSoup, pattern: str) -> CheckResult:
    href = markup.find_favicon(soup)
    details: List[str] = []
    if href is None:
        details.append("no <link rel=icon> or <link rel='shortcut icon'> found")
    elif not re.search(pattern, href, re.IGNORECASE):
        details.append(f"favicon href {href!r} does not match {pattern!r}")
    return _result(name, "favicon", url, details)


def check_robots_meta(name: str, url: str, soup: BeautifulSoup, expected: str) -> CheckResult:
    contents = markup.find_meta_contents(soup, "robots")
    details: List[str] = []
    if len(contents) != 1:
        details.append(f"meta robots appears {len(contents)} times, expected exactly 1")
    elif contents[0].lower() != expected.lower():
        details.append(f"meta robots is {contents[0]!r}, expected {expected!r}")
    return _result(name, "robots_meta", url, details)


def check_sitemap(
    name: str,
    response: FetchResult,
    required_urls: Sequence[str],
    empty_sitemap: str = "warn",
) -> CheckResult:
    """Validate a sitemap response.

    With ``empty_sitemap="warn"`` a sitemap without ``<loc>`` entries only
    adds a warning; missing required URLs still fail the check.
    """
    if not response.ok:
        details = [f"Sitemap request failed with status {response.status}"]
        return _result(name, "sitemap", response.url, details)

    details = document_problems(response.text)
    warnings: List[str] = []

    found = extract_loc_urls(response.text)
    if not found:
        message = "Sitemap contains no URLs"
        if empty_sitemap == "fail":
            details.append(message)
        else:
            warnings.append(message)

    details.extend(f"Sitemap is missing URL: {url}" for url in missing_urls(found, required_urls))
    return _result(name, "sitemap", response.url, details, warnings)


def check_robots_txt(name: str, response: FetchResult) -> CheckResult:
    details: List[str] = []
    if not response.ok:
        details.append(f"robots.txt request failed with status {response.status}")
    elif not disallows_all(response.text):
        details.append("robots.txt does not contain 'Disallow: /'")
    return _result(name, "robots_txt", response.url, details)


def check_footer_links(
    name: str,
    url: str,
    reference: Sequence[LinkRecord],
    candidate: Sequence[LinkRecord],
    rewrites: Sequence[Tuple[str, str]],
) -> CheckResult:
    """Footer links on *candidate* must match those on *reference*."""
    if equivalent_link_sets(reference, candidate, rewrites):
        return _result(name, "footer_links", url, [])

    only_reference, only_candidate = link_set_differences(reference, candidate, rewrites)
    details = [f"only on reference page: {link.text!r} -> {link.href}" for link in only_reference]
    details.extend(
        f"only on compared page: {link.text!r} -> {link.href}" for link in only_candidate
    )
    return _result(name, "footer_links", url, details)
