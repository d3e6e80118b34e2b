"""Table-driven scenario generation.

A :class:`~seowatch.models.site.SiteProfile` describes which pages, locales,
and resources to inspect.  :func:`build_scenarios` expands it into one
:class:`Scenario` per concrete check, in a stable order, so the same table
feeds both the audit API and the live test suite.
"""

from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Tuple

from seowatch.models.check import CheckKind
from seowatch.models.site import SiteProfile
from seowatch.services.urls import build_localized_url


class Scenario(NamedTuple):
    name: str
    kind: CheckKind
    urls: Tuple[str, ...]
    params: Dict[str, Any]


# Generation order; also the order results are reported in
ALL_KINDS: Tuple[CheckKind, ...] = (
    "canonical",
    "favicon",
    "lang",
    "hreflang",
    "meta_tags",
    "sitemap",
    "robots_meta",
    "robots_txt",
    "footer_links",
)


def _page(profile: SiteProfile, path: str, locale: Optional[str] = None) -> str:
    return build_localized_url(
        profile.base_domain,
        path,
        locale or profile.default_locale,
        profile.default_locale,
    )


def _canonical(profile: SiteProfile) -> Iterable[Scenario]:
    for path in profile.canonical_paths:
        url = _page(profile, path)
        yield Scenario(f"canonical[{url}]", "canonical", (url,), {})


def _favicon(profile: SiteProfile) -> Iterable[Scenario]:
    url = _page(profile, "")
    yield Scenario(
        f"favicon[{url}]", "favicon", (url,), {"pattern": profile.favicon_pattern}
    )


def _lang(profile: SiteProfile) -> Iterable[Scenario]:
    for locale in profile.locales:
        url = _page(profile, "", locale)
        yield Scenario(f"lang[{locale}]", "lang", (url,), {"locale": locale})


def _hreflang(profile: SiteProfile) -> Iterable[Scenario]:
    url = _page(profile, profile.hreflang_page)
    for locale in profile.locales:
        yield Scenario(
            f"hreflang[{locale}]",
            "hreflang",
            (url,),
            {"locale": locale, "expected": _page(profile, profile.hreflang_path, locale)},
        )


def _meta_tags(profile: SiteProfile) -> Iterable[Scenario]:
    for path in profile.meta_tag_paths:
        url = _page(profile, path)
        yield Scenario(
            f"meta_tags[{url}]",
            "meta_tags",
            (url,),
            {
                "required": list(profile.required_meta_tags),
                "absolute_url_tags": list(profile.absolute_url_meta_tags),
                "allowed_og_types": list(profile.allowed_og_types),
            },
        )


def _sitemap(profile: SiteProfile) -> Iterable[Scenario]:
    url = _page(profile, profile.sitemap_path)
    yield Scenario(
        f"sitemap[{url}]",
        "sitemap",
        (url,),
        {
            "required": [_page(profile, path) for path in profile.sitemap_required_paths],
            "empty_sitemap": profile.empty_sitemap,
        },
    )


def _robots_meta(profile: SiteProfile) -> Iterable[Scenario]:
    for path in profile.robots_meta_paths:
        url = _page(profile, path)
        yield Scenario(
            f"robots_meta[{url}]",
            "robots_meta",
            (url,),
            {"expected": profile.robots_meta_content},
        )


def _robots_txt(profile: SiteProfile) -> Iterable[Scenario]:
    for domain in profile.disallow_domains:
        url = f"{domain.rstrip('/')}/robots.txt"
        yield Scenario(f"robots_txt[{url}]", "robots_txt", (url,), {})


def _footer_links(profile: SiteProfile) -> Iterable[Scenario]:
    reference, candidate = (_page(profile, path) for path in profile.footer_paths)
    yield Scenario(
        f"footer_links[{candidate}]",
        "footer_links",
        (reference, candidate),
        {"rewrites": profile.rewrite_rules()},
    )


_GENERATORS = {
    "canonical": _canonical,
    "favicon": _favicon,
    "lang": _lang,
    "hreflang": _hreflang,
    "meta_tags": _meta_tags,
    "sitemap": _sitemap,
    "robots_meta": _robots_meta,
    "robots_txt": _robots_txt,
    "footer_links": _footer_links,
}


def build_scenarios(
    profile: SiteProfile,
    kinds: Optional[Iterable[CheckKind]] = None,
) -> List[Scenario]:
    """Expand *profile* into the list of scenarios to run.

    Args:
        profile: The site table.
        kinds: Optional subset of check kinds; ``None`` means all of them.
    """
    selected = set(kinds) if kinds is not None else set(ALL_KINDS)
    scenarios: List[Scenario] = []
    for kind in ALL_KINDS:
        if kind in selected:
            scenarios.extend(_GENERATORS[kind](profile))
    return scenarios
