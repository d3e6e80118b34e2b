import re
from typing import List, Literal

from pydantic import BaseModel, Field, field_validator

# Values interpolated into CSS attribute selectors
_LOCALE_RE = re.compile(r"^[A-Za-z0-9_-]+$")
_META_TAG_RE = re.compile(r"^[A-Za-z0-9_:.-]+$")


def _compiles(pattern: str) -> str:
    try:
        re.compile(pattern)
    except re.error as exc:
        raise ValueError(f"invalid regular expression {pattern!r}: {exc}") from exc
    return pattern


def _matching(values: List[str], charset: re.Pattern, what: str) -> List[str]:
    for value in values:
        if not charset.match(value):
            raise ValueError(f"invalid {what} {value!r}")
    return values


class HrefRewrite(BaseModel):
    """One regex rewrite applied to footer hrefs before comparison."""

    pattern: str
    replacement: str = ""

    @field_validator("pattern")
    @classmethod
    def pattern_must_compile(cls, value: str) -> str:
        return _compiles(value)


_DEFAULT_META_TAGS = [
    "og:title",
    "og:description",
    "og:locale",
    "og:type",
    "og:url",
    "og:site_name",
    "og:image",
    "twitter:card",
    "twitter:title",
    "twitter:description",
    "twitter:image",
]

_DEFAULT_DISALLOW_DOMAINS = [
    "https://premium.esimplus.me/",
    "https://bonus.esimplus.me",
    "https://mobiledata-global.esimplus.me",
    "https://onboarding.esimplus.me",
    "https://business.esimplus.me",
]


class SiteProfile(BaseModel):
    """The table every check scenario is generated from.

    Paths are relative to ``base_domain`` and are localised for
    ``default_locale`` unless a check says otherwise.
    """

    base_domain: str = "https://esimplus.me"
    locales: List[str] = Field(default_factory=lambda: ["en", "ru", "es", "fr", "de", "pt", "pl", "it"])
    default_locale: str = "en"

    canonical_paths: List[str] = Field(
        default_factory=lambda: [
            "",
            "virtual-number",
            "esim",
            "esim-argentina",
            "virtual-phone-number/united-kingdom",
        ]
    )

    hreflang_page: str = Field(
        default="esim?showAll=true",
        description="Page whose <link rel=alternate> tags are inspected.",
    )
    hreflang_path: str = Field(
        default="esim",
        description="Path every alternate is expected to point at, per locale.",
    )

    meta_tag_paths: List[str] = Field(
        default_factory=lambda: ["", "virtual-phone-number/united-kingdom"]
    )
    required_meta_tags: List[str] = Field(default_factory=lambda: list(_DEFAULT_META_TAGS))
    absolute_url_meta_tags: List[str] = Field(default_factory=lambda: ["og:url", "og:image"])
    allowed_og_types: List[str] = Field(default_factory=lambda: ["website", "article"])

    robots_meta_paths: List[str] = Field(
        default_factory=lambda: ["", "ru", "virtual-phone-number/united-kingdom"]
    )
    robots_meta_content: str = "index, follow"

    sitemap_path: str = "sitemap.xml"
    sitemap_required_paths: List[str] = Field(default_factory=lambda: ["", "ru", "es"])
    empty_sitemap: Literal["warn", "fail"] = Field(
        default="warn",
        description=(
            "What a sitemap without any <loc> entries means: a warning on an "
            "otherwise passing check, or a failure."
        ),
    )

    disallow_domains: List[str] = Field(default_factory=lambda: list(_DEFAULT_DISALLOW_DOMAINS))

    favicon_pattern: str = r"\.ico$"

    footer_paths: List[str] = Field(
        default_factory=lambda: ["", "virtual-number"],
        min_length=2,
        max_length=2,
    )
    footer_href_rewrites: List[HrefRewrite] = Field(
        default_factory=lambda: [
            HrefRewrite(pattern=r"/virtual-number$", replacement=""),
            HrefRewrite(pattern=r"/virtual-number/", replacement="/"),
            HrefRewrite(pattern=r"/$", replacement=""),
        ]
    )

    def rewrite_rules(self) -> List[tuple]:
        return [(rule.pattern, rule.replacement) for rule in self.footer_href_rewrites]

    @field_validator("favicon_pattern")
    @classmethod
    def favicon_pattern_must_compile(cls, value: str) -> str:
        return _compiles(value)

    @field_validator("locales")
    @classmethod
    def locales_must_be_plain(cls, value: List[str]) -> List[str]:
        return _matching(value, _LOCALE_RE, "locale")

    @field_validator("default_locale")
    @classmethod
    def default_locale_must_be_plain(cls, value: str) -> str:
        return _matching([value], _LOCALE_RE, "locale")[0]

    @field_validator("required_meta_tags", "absolute_url_meta_tags")
    @classmethod
    def meta_tags_must_be_plain(cls, value: List[str]) -> List[str]:
        return _matching(value, _META_TAG_RE, "meta tag")
