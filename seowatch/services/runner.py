"""Scenario execution: fetch what a scenario needs, then apply its check."""

import logging
from typing import Iterable, List, Optional

import httpx
from playwright.async_api import Error as PlaywrightError

from seowatch.models.check import CheckKind, CheckResult
from seowatch.models.site import SiteProfile
from seowatch.services import checks, markup
from seowatch.services.browser_fetcher import render_page
from seowatch.services.fetcher import fetch_resource
from seowatch.services.scenarios import Scenario, build_scenarios

logger = logging.getLogger(__name__)

# Errors that mean "could not obtain the page/resource" rather than a bug
_TRANSPORT_ERRORS = (ValueError, httpx.HTTPError, RuntimeError, PlaywrightError)


class UnknownCheckKind(Exception):
    """Raised for a scenario whose kind has no check function."""


async def _soup(url: str):
    page = await render_page(url, wait_until="domcontentloaded")
    return markup.parse(page.html)


async def _footer_links(url: str):
    page = await render_page(url, wait_until="load")
    return markup.find_footer_links(markup.parse(page.html), page.url)


async def _execute(scenario: Scenario) -> CheckResult:
    name, kind, urls, params = scenario
    url = urls[0]

    if kind == "canonical":
        return checks.check_canonical(name, url, await _soup(url))
    if kind == "favicon":
        return checks.check_favicon(name, url, await _soup(url), params["pattern"])
    if kind == "lang":
        return checks.check_lang(name, url, await _soup(url), params["locale"])
    if kind == "hreflang":
        return checks.check_hreflang(
            name, url, await _soup(url), params["locale"], params["expected"]
        )
    if kind == "meta_tags":
        return checks.check_meta_tags(
            name,
            url,
            await _soup(url),
            params["required"],
            params["absolute_url_tags"],
            params["allowed_og_types"],
        )
    if kind == "robots_meta":
        return checks.check_robots_meta(name, url, await _soup(url), params["expected"])
    if kind == "sitemap":
        result = checks.check_sitemap(
            name, await fetch_resource(url), params["required"], params["empty_sitemap"]
        )
        for warning in result.warnings:
            logger.warning("%s: %s", name, warning)
        return result
    if kind == "robots_txt":
        return checks.check_robots_txt(name, await fetch_resource(url))
    if kind == "footer_links":
        reference, candidate = urls
        return checks.check_footer_links(
            name,
            candidate,
            await _footer_links(reference),
            await _footer_links(candidate),
            params["rewrites"],
        )
    raise UnknownCheckKind(kind)


async def run_scenario(scenario: Scenario) -> CheckResult:
    """Run one scenario and return its result.

    A failure to fetch the page or resource is reported as a failed result,
    never retried.
    """
    logger.info("Running scenario %s", scenario.name)
    try:
        result = await _execute(scenario)
    except _TRANSPORT_ERRORS as exc:
        logger.warning("Scenario %s: transport failure – %s", scenario.name, exc)
        return CheckResult(
            name=scenario.name,
            kind=scenario.kind,
            url=scenario.urls[-1],
            passed=False,
            details=[f"transport failure: {exc}"],
        )

    if not result.passed:
        logger.info("Scenario %s failed: %s", scenario.name, "; ".join(result.details))
    return result


async def run_audit(
    profile: SiteProfile,
    kinds: Optional[Iterable[CheckKind]] = None,
) -> List[CheckResult]:
    """Run every scenario generated from *profile*, one after another."""
    results: List[CheckResult] = []
    for scenario in build_scenarios(profile, kinds):
        results.append(await run_scenario(scenario))
    return results
