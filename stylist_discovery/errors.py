from __future__ import annotations


class DiscoveryError(Exception):
    """Base class for errors raised by the discovery engines."""


class InvalidFilterSpec(DiscoveryError, ValueError):
    """A filter specification violates the caller contract (bad numeric ranges)."""


class MalformedCandidate(DiscoveryError):
    """A candidate's coordinates cannot be projected onto the map canvas."""

    def __init__(self, candidate_id: str, reason: str) -> None:
        super().__init__(f"Candidate {candidate_id!r}: {reason}")
        self.candidate_id = candidate_id
        self.reason = reason
