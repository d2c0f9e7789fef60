"""User account model."""

from sqlalchemy import Column, String, Boolean, DateTime, Text

from flatscout.models.base import Base, TimestampMixin, UUIDMixin

USER_ROLES = ("user", "admin")
USER_TYPES = ("flat_owner", "flat_finder")


class User(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(100), nullable=False)
    hashed_password = Column(String(255), nullable=False)

    # Public profile
    phone = Column(String(30), default="", nullable=False)
    bio = Column(Text, default="", nullable=False)
    location = Column(String(255), default="", nullable=False)
    profile_image = Column(Text, default="", nullable=False)

    role = Column(String(10), default="user", nullable=False)  # user, admin
    user_type = Column(String(20), default="flat_finder", nullable=False)  # flat_owner, flat_finder
    has_completed_preferences = Column(Boolean, default=False, nullable=False)

    is_active = Column(Boolean, default=True, nullable=False)
    last_login_at = Column(DateTime(timezone=True))
