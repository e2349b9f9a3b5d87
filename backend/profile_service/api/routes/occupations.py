"""Occupation Lookup — serves the fixed occupation catalogue to the form.

Invariants:
    - No storage access; response order equals core/occupations.py order
"""

from fastapi import APIRouter, Response, status

from profile_service.core.occupations import list_occupations
from profile_service.schemas.profile import OccupationList

router = APIRouter(prefix="/api/occupations", tags=["occupations"])


@router.get("", response_model=OccupationList)
async def get_occupations():
    """List occupations offered by the profile form."""
    return OccupationList(items=list_occupations())


@router.options("", status_code=status.HTTP_204_NO_CONTENT)
async def occupations_options():
    return Response(status_code=status.HTTP_204_NO_CONTENT)
