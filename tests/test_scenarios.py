"""Tests for seowatch.services.scenarios.build_scenarios."""

from collections import Counter

from seowatch.models.site import SiteProfile
from seowatch.services.scenarios import ALL_KINDS, build_scenarios


def _by_kind(scenarios):
    return Counter(s.kind for s in scenarios)


class TestDefaultProfile:
    def test_scenario_counts_per_kind(self):
        counts = _by_kind(build_scenarios(SiteProfile()))
        assert counts == {
            "canonical": 5,
            "favicon": 1,
            "lang": 8,
            "hreflang": 8,
            "meta_tags": 2,
            "sitemap": 1,
            "robots_meta": 3,
            "robots_txt": 5,
            "footer_links": 1,
        }

    def test_names_are_unique(self):
        names = [s.name for s in build_scenarios(SiteProfile())]
        assert len(names) == len(set(names))

    def test_generation_follows_kind_order(self):
        kinds = [s.kind for s in build_scenarios(SiteProfile())]
        first_seen = list(dict.fromkeys(kinds))
        assert first_seen == list(ALL_KINDS)

    def test_canonical_urls(self):
        urls = [s.urls[0] for s in build_scenarios(SiteProfile(), ["canonical"])]
        assert urls == [
            "https://esimplus.me/",
            "https://esimplus.me/virtual-number",
            "https://esimplus.me/esim",
            "https://esimplus.me/esim-argentina",
            "https://esimplus.me/virtual-phone-number/united-kingdom",
        ]

    def test_lang_pages_are_localised(self):
        scenarios = {s.params["locale"]: s for s in build_scenarios(SiteProfile(), ["lang"])}
        assert scenarios["en"].urls == ("https://esimplus.me/",)
        assert scenarios["ru"].urls == ("https://esimplus.me/ru/",)

    def test_hreflang_expectations(self):
        scenarios = {s.params["locale"]: s for s in build_scenarios(SiteProfile(), ["hreflang"])}
        assert scenarios["ru"].urls == ("https://esimplus.me/esim?showAll=true",)
        assert scenarios["ru"].params["expected"] == "https://esimplus.me/ru/esim"
        assert scenarios["en"].params["expected"] == "https://esimplus.me/esim"

    def test_sitemap_scenario(self):
        (scenario,) = build_scenarios(SiteProfile(), ["sitemap"])
        assert scenario.urls == ("https://esimplus.me/sitemap.xml",)
        assert scenario.params["required"] == [
            "https://esimplus.me/",
            "https://esimplus.me/ru",
            "https://esimplus.me/es",
        ]
        assert scenario.params["empty_sitemap"] == "warn"

    def test_robots_txt_urls(self):
        urls = [s.urls[0] for s in build_scenarios(SiteProfile(), ["robots_txt"])]
        assert "https://premium.esimplus.me/robots.txt" in urls
        assert all(url.count("//") == 1 for url in urls)

    def test_footer_scenario_compares_two_pages(self):
        (scenario,) = build_scenarios(SiteProfile(), ["footer_links"])
        assert scenario.urls == ("https://esimplus.me/", "https://esimplus.me/virtual-number")
        assert scenario.params["rewrites"][0] == (r"/virtual-number$", "")


class TestCustomProfile:
    def test_kind_filter(self):
        scenarios = build_scenarios(SiteProfile(), ["robots_txt", "favicon"])
        assert {s.kind for s in scenarios} == {"robots_txt", "favicon"}

    def test_empty_kind_filter(self):
        assert build_scenarios(SiteProfile(), []) == []

    def test_other_site(self):
        profile = SiteProfile(
            base_domain="https://example.org",
            locales=["de", "fr"],
            default_locale="de",
            canonical_paths=["shop"],
            empty_sitemap="fail",
        )
        canonical = build_scenarios(profile, ["canonical"])
        assert [s.urls[0] for s in canonical] == ["https://example.org/shop"]

        hreflang = build_scenarios(profile, ["hreflang"])
        assert [s.params["expected"] for s in hreflang] == [
            "https://example.org/esim",
            "https://example.org/fr/esim",
        ]

        (sitemap,) = build_scenarios(profile, ["sitemap"])
        assert sitemap.params["empty_sitemap"] == "fail"
