"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ProfileId is 32 lowercase hex characters (uuid4 without separators)
    - PrincipalId identifies the acting principal recorded in audit columns
    - SYSTEM_PRINCIPAL_ID is the only principal that writes (no auth integration)
    - All rejection reasons encoded as an Enum, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for RejectReason: value doubles as the machine-readable error code
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ProfileId = NewType("ProfileId", str)
PrincipalId = NewType("PrincipalId", str)

# Placeholder principal recorded as creator while no authentication exists.
# Passed explicitly into ProfileStore.create so a real identity can replace it.
SYSTEM_PRINCIPAL_ID = PrincipalId("00000000000000000000000000000001")


# ─── Enums ───────────────────────────────────────────────────────

class RejectReason(str, Enum):
    """Why a profile submission was rejected. Checked in declaration order."""
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_PHONE_FORMAT = "INVALID_PHONE_FORMAT"
    INVALID_DATE_FORMAT = "INVALID_DATE_FORMAT"


# Client-facing messages, returned verbatim as plain text.
REJECT_MESSAGES: dict[RejectReason, str] = {
    RejectReason.MISSING_FIELD: "all fields are required",
    RejectReason.INVALID_PHONE_FORMAT: "phone must contain digits only",
    RejectReason.INVALID_DATE_FORMAT: "birthDay must be in format DD/MM/YYYY",
}

SAVE_SUCCESS_MESSAGE = "save data success"
