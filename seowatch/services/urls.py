"""URL utilities: locale-aware URL building, normalisation, and link-set comparison."""

import re
import unicodedata
from typing import Iterable, List, NamedTuple, Sequence, Tuple

_TRAILING_SLASHES = re.compile(r"/+$")


class LinkRecord(NamedTuple):
    text: str
    href: str


class UrlSpec(NamedTuple):
    base_domain: str
    path: str
    locale: str
    default_locale: str = "en"

    @property
    def canonical_url(self) -> str:
        return build_localized_url(self.base_domain, self.path, self.locale, self.default_locale)


def build_localized_url(base_domain: str, path: str, locale: str, default_locale: str = "en") -> str:
    """Return the URL of *path* for *locale* on *base_domain*.

    The default locale is served without a prefix; every other locale lives
    under ``/{locale}/``.  The path is not validated.
    """
    base = base_domain.rstrip("/")
    path = path.lstrip("/")
    if locale == default_locale:
        return f"{base}/{path}"
    return f"{base}/{locale}/{path}"


def normalize_url(url: str) -> str:
    """Strip trailing slashes and lower-case *url*."""
    return _TRAILING_SLASHES.sub("", url).lower()


def urls_equal(a: str, b: str) -> bool:
    return normalize_url(a) == normalize_url(b)


def rewrite_href(href: str, rewrites: Iterable[Tuple[str, str]]) -> str:
    """Apply each ``(pattern, replacement)`` rule to *href* in order.

    Only the first match of each pattern is replaced.
    """
    for pattern, replacement in rewrites:
        href = re.sub(pattern, replacement, href, count=1)
    return href


def _collation_key(text: str) -> str:
    # Accent- and case-insensitive primary ordering, close to localeCompare
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def _canonical_links(
    links: Iterable[LinkRecord], rewrites: Sequence[Tuple[str, str]]
) -> List[LinkRecord]:
    mapped = [
        LinkRecord(link.text, rewrite_href(link.href, rewrites))
        for link in links
        if link.text
    ]
    return sorted(mapped, key=lambda link: (_collation_key(link.text), link.text, link.href))


def equivalent_link_sets(
    a: Iterable[LinkRecord],
    b: Iterable[LinkRecord],
    rewrites: Sequence[Tuple[str, str]] = (),
) -> bool:
    """Return True when *a* and *b* hold the same labelled links.

    Entries without display text are ignored, hrefs are rewritten with
    *rewrites*, and both sides are ordered by display text before an
    element-wise comparison.
    """
    return _canonical_links(a, rewrites) == _canonical_links(b, rewrites)


def link_set_differences(
    a: Iterable[LinkRecord],
    b: Iterable[LinkRecord],
    rewrites: Sequence[Tuple[str, str]] = (),
) -> Tuple[List[LinkRecord], List[LinkRecord]]:
    """Return ``(only_in_a, only_in_b)`` after the same normalisation as
    :func:`equivalent_link_sets`.  Duplicates are counted."""
    left = _canonical_links(a, rewrites)
    right = _canonical_links(b, rewrites)

    only_left: List[LinkRecord] = []
    remaining = list(right)
    for link in left:
        if link in remaining:
            remaining.remove(link)
        else:
            only_left.append(link)
    return only_left, remaining
