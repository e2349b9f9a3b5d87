"""Profile Store — assigns identity and audit fields, then durably inserts a profile.

Invariants:
    - One INSERT per create(); never upsert or merge; a duplicate id is a StorageFailure
    - created_at == updated_at at creation; deleted_at / updated_by / deleted_by stay NULL
    - On any failure the transaction is rolled back and no row is visible
    - The storage cause is logged here and never reaches the caller
    - get() returns active rows only (deleted_at IS NULL)

Design Decisions:
    - created_by injected by the caller: the store has no notion of "current user"
    - One store per AsyncSession (per request): no locking, each create targets a
      freshly generated key
    - new_profile_id is module-level so tests can force a collision
"""

import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from profile_service.core.domain_types import ProfileId, PrincipalId
from profile_service.core.errors import StorageFailure
from profile_service.core.repository_protocols import ProfileSubmissionLike
from profile_service.models.profile import Profile

logger = logging.getLogger(__name__)


def new_profile_id() -> ProfileId:
    """128-bit random id rendered as 32 hex chars, no dashes."""
    return ProfileId(uuid.uuid4().hex)


class ProfileStore:
    """Persistence boundary for profiles. Implements ProfileRepository."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(
        self, submission: ProfileSubmissionLike, created_by: PrincipalId,
    ) -> ProfileId:
        """Insert a new profile and return its id. Raises StorageFailure."""
        profile_id = new_profile_id()
        now = datetime.now(timezone.utc)
        record = Profile(
            id=profile_id,
            created_at=now,
            updated_at=now,
            created_by=created_by,
            first_name=submission.first_name,
            last_name=submission.last_name,
            email=submission.email,
            phone=submission.phone,
            profile_image=submission.profile_image,
            birth_date=submission.birth_date,
            occupation=submission.occupation,
            sex=submission.sex,
        )
        try:
            self._db.add(record)
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            logger.error(
                f"Profile insert violated a constraint: {e}",
                extra={"profile_id": profile_id, "operation": "insert"},
            )
            raise StorageFailure("insert") from e
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(
                f"Profile insert failed: {e}",
                extra={"profile_id": profile_id, "operation": "insert"},
            )
            raise StorageFailure("insert") from e

        logger.info("Profile created", extra={"profile_id": profile_id})
        return profile_id

    async def get(self, profile_id: ProfileId) -> Profile | None:
        """Fetch an active profile by id, or None."""
        result = await self._db.execute(
            select(Profile).where(
                Profile.id == profile_id,
                Profile.deleted_at.is_(None),
            ),
        )
        return result.scalar_one_or_none()
