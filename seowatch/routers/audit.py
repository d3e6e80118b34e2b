import logging
from typing import List

from fastapi import APIRouter, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from seowatch.models.audit_request import AuditRequest
from seowatch.models.audit_response import AuditResponse, ScenarioInfo
from seowatch.models.site import SiteProfile
from seowatch.services.runner import run_audit
from seowatch.services.scenarios import build_scenarios

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter()


@router.get(
    "/scenarios",
    response_model=List[ScenarioInfo],
    summary="List the check scenarios of the default site profile",
)
async def list_scenarios() -> List[ScenarioInfo]:
    return [
        ScenarioInfo(name=s.name, kind=s.kind, urls=list(s.urls))
        for s in build_scenarios(SiteProfile())
    ]


@router.post(
    "/audit",
    response_model=AuditResponse,
    summary="Run SEO markup checks against a site",
    description=(
        "Expands the site profile into check scenarios (canonical, hreflang, "
        "meta tags, sitemap, robots, favicon, footer parity), runs them one "
        "after another and reports a result per scenario.  Pages are rendered "
        "in a headless browser, so a full audit takes a while."
    ),
)
@limiter.limit("2/minute")
async def audit(request: Request, body: AuditRequest) -> AuditResponse:
    profile = body.profile
    logger.info(
        "Audit request received",
        extra={"base_domain": profile.base_domain, "kinds": body.kinds},
    )

    results = await run_audit(profile, body.kinds)
    passed = sum(1 for r in results if r.passed)

    return AuditResponse(
        base_domain=profile.base_domain,
        checks_run=len(results),
        passed=passed,
        failed=len(results) - passed,
        results=results,
    )
