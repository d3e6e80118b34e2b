from typing import List, Optional

from pydantic import BaseModel, Field

from seowatch.models.check import CheckKind
from seowatch.models.site import SiteProfile


class AuditRequest(BaseModel):
    profile: SiteProfile = Field(default_factory=SiteProfile)
    kinds: Optional[List[CheckKind]] = Field(
        default=None,
        description="Restrict the audit to these check kinds (default: all).",
        examples=[["canonical", "sitemap"]],
    )
