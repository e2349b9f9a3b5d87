"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Persistence accessed through the ProfileRepository Protocol
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - ProfileSubmissionLike lets the validator accept the Pydantic request model
      without core importing pydantic
"""

from typing import Protocol

from profile_service.core.domain_types import ProfileId, PrincipalId


class ProfileSubmissionLike(Protocol):
    """Structural contract for a decoded profile submission."""
    first_name: str
    last_name: str
    email: str
    phone: str
    profile_image: str
    birth_date: str
    occupation: str
    sex: str


class ProfileRepository(Protocol):
    """Contract for profile persistence, implemented by services/profile_store.py."""
    async def create(
        self, submission: ProfileSubmissionLike, created_by: PrincipalId,
    ) -> ProfileId: ...
    async def get(self, profile_id: ProfileId) -> object | None: ...
