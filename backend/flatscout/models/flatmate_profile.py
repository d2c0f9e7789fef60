"""Flatmate profile model: one roommate-matching profile per user."""

from sqlalchemy import Column, String, Integer, Float, Text, ForeignKey, Uuid

from flatscout.models.base import Base, JSONType, TimestampMixin, UUIDMixin


class FlatmateProfile(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "flatmate_profiles"

    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)

    name = Column(String(100), nullable=False)
    photo_url = Column(Text)
    gender = Column(String(20), nullable=False)  # Male, Female, Other
    age = Column(Integer, nullable=False)
    occupation = Column(String(100), nullable=False)
    hometown = Column(String(100), nullable=False)
    languages = Column(JSONType, default=list, nullable=False)
    food_preference = Column(String(50), nullable=False)
    social_preference = Column(String(50), nullable=False)
    hobbies = Column(JSONType, default=list, nullable=False)
    work_mode = Column(String(50), nullable=False)
    relationship_status = Column(String(50))
    music_preference = Column(String(100))
    guest_policy = Column(String(50), nullable=False)
    wakeup_time = Column(String(20))
    bedtime = Column(String(20))

    # Scored fields
    preferred_gender = Column(String(20), nullable=False)  # Male, Female, Any
    budget = Column(Float, nullable=False)
    location_preference = Column(String(255), nullable=False)
    habits = Column(JSONType, nullable=False)  # smoking, pets, sleep_time, cleanliness

    bio = Column(Text, nullable=False)
