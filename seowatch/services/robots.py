"""robots.txt directive parsing."""

import re

# "Disallow: /" with nothing after the slash; directive name in any case
_DISALLOW_ALL = re.compile(r"^\s*disallow\s*:\s*/\s*$", re.IGNORECASE)


def disallows_all(body: str) -> bool:
    """Return True when *body* contains a ``Disallow: /`` directive.

    Comments (``#`` to end of line) are ignored.  Stricter than a substring
    test for ``"Disallow: /"``: ``Disallow: /private`` does not count, only
    a rule that blocks the whole site does.
    """
    for line in body.splitlines():
        if _DISALLOW_ALL.match(line.split("#", 1)[0]):
            return True
    return False
