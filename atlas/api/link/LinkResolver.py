"""Link resolver (UNO: single class)."""

from collections.abc import Iterable, Sequence

from .LinkTarget import LinkTarget
from .ResolveResult import Placeholder, Resolved, ResolveResult, Unresolved


class LinkResolver:
    """Resolves magic link ids against a fixed set of targets.

    Resolution priority:
    1. Exact id match
    2. Match in aliases
    3. Slug fallback
    4. Unresolved

    All lookups are case-insensitive. When two targets share a key the later
    one wins.
    """

    def __init__(self, targets: Iterable[LinkTarget]):
        """Build lookup maps for fast resolution.

        Args:
            targets: Link targets in construction order
        """
        self._by_id: dict[str, LinkTarget] = {}
        self._by_alias: dict[str, LinkTarget] = {}
        self._by_slug: dict[str, LinkTarget] = {}

        for target in targets:
            self._by_id[target.id.lower()] = target
            for alias in target.aliases:
                self._by_alias[alias.lower()] = target
            self._by_slug[target.slug.lower()] = target

    def resolve(self, id: str) -> ResolveResult:
        """Resolve a single id to a target.

        Args:
            id: The id as written in content

        Returns:
            Resolved, Placeholder or Unresolved; never raises
        """
        normalized = id.lower()
        target = self._by_id.get(normalized) or self._by_alias.get(normalized) or self._by_slug.get(normalized)

        if target is None:
            return Unresolved(id=id)
        if target.placeholder:
            return Placeholder(target=target, matched_id=id)
        return Resolved(target=target, matched_id=id)

    def resolve_first(self, ids: Sequence[str]) -> ResolveResult:
        """Resolve the first matching id from a fallback chain.

        Args:
            ids: Candidate ids, tried in order

        Returns:
            The first result that is not Unresolved, else Unresolved carrying
            the first candidate (empty string for an empty chain)
        """
        for id in ids:
            result = self.resolve(id)
            if not isinstance(result, Unresolved):
                return result
        return Unresolved(id=ids[0] if ids else "")
