from __future__ import annotations

from collections.abc import Iterable

from ..candidates.models import Candidate


class SelectionState:
    """The single highlighted candidate of one map widget.

    Not shared between widgets: each surface that needs its own highlight
    holds its own instance.
    """

    def __init__(self, candidates: Iterable[Candidate] = ()) -> None:
        self._candidate_ids: set[str] = {c.id for c in candidates}
        self._selected: str | None = None

    @property
    def selected(self) -> str | None:
        return self._selected

    def select(self, candidate_id: str) -> bool:
        """Highlight *candidate_id*. Returns whether the selection changed.

        Unknown ids are ignored. Selecting the current id again keeps it
        selected.
        """
        if candidate_id not in self._candidate_ids or candidate_id == self._selected:
            return False
        self._selected = candidate_id
        return True

    def clear(self) -> None:
        self._selected = None

    def sync(self, candidates: Iterable[Candidate]) -> None:
        """Replace the current candidate list, dropping a selection that left it."""
        self._candidate_ids = {c.id for c in candidates}
        if self._selected not in self._candidate_ids:
            self._selected = None
