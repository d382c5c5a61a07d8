"""Query parameters for the commit listing endpoint.

``GET /2.0/repositories/{workspace}/{repo_slug}/commits`` accepts repeated
``include`` and ``exclude`` keys naming branches, tags or hashes. The result is
every commit reachable from one of the includes (or from any ref when there
is none) and from none of the excludes. ``path`` keeps only the commits that
touch the given path.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from .constants import MAX_PAGE_LEN


def _ordered_unique(names: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(names))


@dataclass
class CommitsParameters:
    """Branch and path filters for a commit listing.

    ``includes`` and ``excludes`` behave as insertion-ordered sets: adding a
    name twice keeps its first position. Names are compared exactly.
    """

    includes: list[str] = field(default_factory=list)
    excludes: list[str] = field(default_factory=list)
    path: str | None = None

    def __post_init__(self) -> None:
        self.includes = _ordered_unique(self.includes)
        self.excludes = _ordered_unique(self.excludes)

    def include(self, *branches: str) -> "CommitsParameters":
        self.includes = _ordered_unique([*self.includes, *branches])
        return self

    def exclude(self, *branches: str) -> "CommitsParameters":
        self.excludes = _ordered_unique([*self.excludes, *branches])
        return self

    def to_query_params(
        self,
        branch: str | None = None,
        max_items: int | None = None,
    ) -> list[tuple[str, str]]:
        """Build the query string pairs for this filter.

        The order is always: includes (``branch`` first), excludes, path,
        page length.

        Args:
            branch: Branch listed first as an implicit include
            max_items: When set, request pages no larger than this

        Returns:
            List of ``(key, value)`` pairs, with repeated keys
        """
        includes = _ordered_unique([branch, *self.includes] if branch else self.includes)

        params: list[tuple[str, str]] = [("include", name) for name in includes]
        params.extend(("exclude", name) for name in self.excludes)
        if self.path:
            params.append(("path", self.path))
        if max_items is not None and max_items > 0:
            params.append(("pagelen", str(min(max_items, MAX_PAGE_LEN))))
        return params
