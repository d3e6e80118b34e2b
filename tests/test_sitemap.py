"""Tests for seowatch.services.sitemap."""

from seowatch.services.sitemap import document_problems, extract_loc_urls, missing_urls

_SITEMAP = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
    "  <url><loc>https://esimplus.me/</loc></url>\n"
    "  <url><loc> https://esimplus.me/ru/ </loc></url>\n"
    "  <url><LOC>https://esimplus.me/ES</LOC></url>\n"
    "</urlset>"
)


class TestExtractLocUrls:
    def test_extracts_and_normalises(self):
        assert extract_loc_urls(_SITEMAP) == [
            "https://esimplus.me",
            "https://esimplus.me/ru",
            "https://esimplus.me/es",
        ]

    def test_does_not_deduplicate(self):
        xml = "<urlset><loc>https://x/</loc><loc>HTTPS://X</loc></urlset>"
        assert extract_loc_urls(xml) == ["https://x", "https://x"]

    def test_no_loc_elements_yields_empty_list(self):
        assert extract_loc_urls('<?xml version="1.0"?><urlset></urlset>') == []

    def test_not_xml_at_all(self):
        assert extract_loc_urls("<html><body>Not found</body></html>") == []

    def test_body_spanning_lines(self):
        assert extract_loc_urls("<loc>\n  https://x/a/\n</loc>") == ["https://x/a"]


class TestMissingUrls:
    def test_single_root_entry(self):
        xml = '<?xml version="1.0"?><urlset><loc>https://esimplus.me/</loc></urlset>'
        found = extract_loc_urls(xml)
        missing = missing_urls(found, ["https://esimplus.me", "https://esimplus.me/ru"])
        assert missing == ["https://esimplus.me/ru"]

    def test_required_urls_are_normalised(self):
        assert missing_urls(["https://esimplus.me/ru"], ["HTTPS://esimplus.me/RU/"]) == []

    def test_nothing_found(self):
        assert missing_urls([], ["https://x/"]) == ["https://x"]


class TestDocumentProblems:
    def test_valid_document(self):
        assert document_problems(_SITEMAP) == []

    def test_empty_body(self):
        assert document_problems("") == ["Sitemap content is empty"]

    def test_missing_declaration_and_urlset(self):
        problems = document_problems("<html></html>")
        assert len(problems) == 2
        assert any("urlset" in p for p in problems)
