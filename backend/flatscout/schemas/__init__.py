"""Pydantic schemas package."""

from flatscout.schemas.common import CamelModel, Pagination
from flatscout.schemas.user import (
    ConnectedUser,
    PasswordChange,
    UserLogin,
    UserRead,
    UserRegister,
    UserSummary,
    UserUpdate,
)
from flatscout.schemas.flatmate_profile import (
    FlatmateMatch,
    FlatmateProfileBase,
    FlatmateProfileRead,
    FlatmateProfileWrite,
    FullProfile,
    Habits,
)
from flatscout.schemas.connection import (
    ConnectionRequestCreate,
    ConnectionRequestRead,
    ConnectionStatus,
    PendingRequest,
)
from flatscout.schemas.flat_listing import (
    FlatListingBase,
    FlatListingCreate,
    FlatListingRead,
)
from flatscout.schemas.notification import (
    MarkAllReadResult,
    NotificationPage,
    NotificationRead,
)

__all__ = [
    "CamelModel",
    "Pagination",
    # User
    "ConnectedUser",
    "PasswordChange",
    "UserLogin",
    "UserRead",
    "UserRegister",
    "UserSummary",
    "UserUpdate",
    # FlatmateProfile
    "FlatmateMatch",
    "FlatmateProfileBase",
    "FlatmateProfileRead",
    "FlatmateProfileWrite",
    "FullProfile",
    "Habits",
    # ConnectionRequest
    "ConnectionRequestCreate",
    "ConnectionRequestRead",
    "ConnectionStatus",
    "PendingRequest",
    # FlatListing
    "FlatListingBase",
    "FlatListingCreate",
    "FlatListingRead",
    # Notification
    "MarkAllReadResult",
    "NotificationPage",
    "NotificationRead",
]
