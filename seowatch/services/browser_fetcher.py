"""Playwright-based page renderer used by the markup checks."""

from typing import Literal, NamedTuple

from playwright.async_api import async_playwright

from seowatch.services.fetcher import MAX_CONTENT_SIZE, validate_url

TIMEOUT_MS = 30_000  # 30 s in milliseconds

WaitUntil = Literal["commit", "domcontentloaded", "load", "networkidle"]


class RenderedPage(NamedTuple):
    url: str
    html: str


async def render_page(url: str, *, wait_until: WaitUntil = "domcontentloaded") -> RenderedPage:
    """Open *url* in headless Chromium and return the final URL and DOM.

    Args:
        url: The target URL (must be http/https and public).
        wait_until: Navigation milestone to wait for before reading the DOM.

    Raises:
        ValueError: if the URL fails SSRF / scheme validation.
        RuntimeError: if the rendered HTML exceeds MAX_CONTENT_SIZE.
        playwright.async_api.Error: on browser/network errors.
    """
    validate_url(url)

    async with async_playwright() as pw:
        browser = await pw.chromium.launch(
            headless=True,
            args=[
                # Chromium's sandbox needs a user namespace that containers
                # running as root do not provide.
                "--no-sandbox",
                "--disable-dev-shm-usage",
                "--disable-gpu",
            ],
        )
        context = await browser.new_context()
        page = await context.new_page()
        try:
            await page.goto(url, wait_until=wait_until, timeout=TIMEOUT_MS)
            final_url = page.url
            html = await page.content()
        finally:
            await context.close()
            await browser.close()

    if len(html.encode()) > MAX_CONTENT_SIZE:
        raise RuntimeError("Rendered HTML exceeds the maximum allowed size.")

    return RenderedPage(url=final_url, html=html)
