"""Profile Schemas — wire contracts for profile creation and the occupation list.

Invariants:
    - ProfileSubmission only parses; format rules live in core/enforce_profile.py
    - Missing or null fields parse to "" so they are rejected as MISSING_FIELD,
      never as a schema error
    - Non-string values are schema errors (mapped to "invalid JSON" by the handler)

Design Decisions:
    - AliasChoices accept the current names (profileImage, birthDate), the legacy
      client names (profileBase64, birthDay) and snake_case
    - Attribute names match ProfileSubmissionLike so the pure validator takes this model directly
"""

from pydantic import AliasChoices, BaseModel, Field, field_validator


class ProfileSubmission(BaseModel):
    """Decoded POST /api/profiles body."""
    first_name: str = Field("", validation_alias=AliasChoices("firstName", "first_name"))
    last_name: str = Field("", validation_alias=AliasChoices("lastName", "last_name"))
    email: str = Field("", validation_alias=AliasChoices("email"))
    phone: str = Field("", validation_alias=AliasChoices("phone"))
    profile_image: str = Field(
        "", validation_alias=AliasChoices("profileImage", "profileBase64", "profile_image"),
    )
    birth_date: str = Field(
        "", validation_alias=AliasChoices("birthDate", "birthDay", "birth_date"),
    )
    occupation: str = Field("", validation_alias=AliasChoices("occupation"))
    sex: str = Field("", validation_alias=AliasChoices("sex"))

    @field_validator("*", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        return "" if v is None else v


class ProfileCreated(BaseModel):
    """Successful creation response."""
    id: str
    message: str


class OccupationList(BaseModel):
    """Occupation catalogue response."""
    items: list[str]
