from typing import List, Literal

from pydantic import BaseModel, Field

CheckKind = Literal[
    "canonical",
    "lang",
    "hreflang",
    "meta_tags",
    "favicon",
    "robots_meta",
    "sitemap",
    "robots_txt",
    "footer_links",
]


class CheckResult(BaseModel):
    """Outcome of one check scenario."""

    name: str
    kind: CheckKind
    url: str
    passed: bool
    details: List[str] = Field(default_factory=list)
    """Failure messages; empty when the check passed."""
    warnings: List[str] = Field(default_factory=list)
