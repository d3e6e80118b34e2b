from typing import List

from pydantic import BaseModel

from seowatch.models.check import CheckKind, CheckResult


class ScenarioInfo(BaseModel):
    name: str
    kind: CheckKind
    urls: List[str]


class AuditResponse(BaseModel):
    base_domain: str
    checks_run: int
    passed: int
    failed: int
    results: List[CheckResult]
