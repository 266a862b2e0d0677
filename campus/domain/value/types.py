"""Domain value objects for campus.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from campus.domain.value.common import RootValueObject

UNKNOWN_AUTHOR = "Unknown User"


class LikeTargetType(str, Enum):
    """Type of entity that can be liked."""

    POST = "post"
    COMMENT = "comment"


class OrphanPolicy(str, Enum):
    """What to do with a reply whose parent is not in the batch.

    PROMOTE treats the reply as a top-level thread, DROP omits it.
    """

    PROMOTE = "promote"
    DROP = "drop"


class RejectionReason(str, Enum):
    """Why a toggle request was refused without touching state."""

    ALREADY_PENDING = "already_pending"
    NOT_AUTHENTICATED = "not_authenticated"


class MemberRole(str, Enum):
    """Role of a member inside a community."""

    MEMBER = "member"
    MODERATOR = "moderator"
    ADMIN = "admin"


class Handle(RootValueObject[str]):
    """Display handle of a campus user (e.g. 'Ada L.' or 'ada.lovelace')."""

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle is not blank and within length limits."""
        if not v.strip() or len(v) > 255:
            raise ValueError("Handle must be 1-255 characters")
        return v


class CommunityName(RootValueObject[str]):
    """Community name, 3-100 characters."""

    @field_validator("root")
    @classmethod
    def validate_community_name(cls, v: str) -> str:
        """Validate community name length."""
        stripped = v.strip()
        if len(stripped) < 3 or len(stripped) > 100:
            raise ValueError("Community name must be 3-100 characters")
        return stripped
