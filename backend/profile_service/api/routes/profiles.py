"""Profile Creation — validate a submission, then persist it.

Invariants:
    - Validation runs before any storage access; a rejected submission never
      reaches ProfileStore
    - created_by is always SYSTEM_PRINCIPAL_ID (no authentication)
    - Errors propagate as ProfileServiceError and are rendered by api/error_handlers.py

Design Decisions:
    - Store obtained through a dependency typed as ProfileRepository: tests and a
      future identity-aware store can be swapped in via dependency_overrides
    - 200 with {id, message} on success, matching what the form client expects
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from profile_service.core.domain_types import SYSTEM_PRINCIPAL_ID, SAVE_SUCCESS_MESSAGE
from profile_service.core.enforce_profile import validate_profile_submission
from profile_service.core.errors import ProfileValidationError
from profile_service.core.repository_protocols import ProfileRepository
from profile_service.infrastructure.database import get_db
from profile_service.schemas.profile import ProfileSubmission, ProfileCreated
from profile_service.services.profile_store import ProfileStore

router = APIRouter(prefix="/api/profiles", tags=["profiles"])


async def get_profile_store(db: AsyncSession = Depends(get_db)) -> ProfileRepository:
    """FastAPI dependency: one store per request session."""
    return ProfileStore(db)


@router.post("", response_model=ProfileCreated, status_code=status.HTTP_200_OK)
async def create_profile(
    body: ProfileSubmission,
    store: ProfileRepository = Depends(get_profile_store),
):
    """Create a profile record from a form submission."""
    reason = validate_profile_submission(body)
    if reason is not None:
        raise ProfileValidationError(reason)

    profile_id = await store.create(body, created_by=SYSTEM_PRINCIPAL_ID)
    return ProfileCreated(id=profile_id, message=SAVE_SUCCESS_MESSAGE)


@router.options("", status_code=status.HTTP_204_NO_CONTENT)
async def profiles_options():
    return Response(status_code=status.HTTP_204_NO_CONTENT)
