"""Error raised for unresolved links under the ``error`` policy."""

from collections.abc import Sequence

from ._constants import FALLBACK_SEPARATOR


class UnresolvedLinkError(ValueError):
    """A magic link could not be resolved and the policy is ``error``."""

    def __init__(self, ids: Sequence[str]):
        self.ids = tuple(ids)
        super().__init__(f"Unresolved magic link: {FALLBACK_SEPARATOR.join(self.ids)}")
