"""Flat listing model."""

from sqlalchemy import Column, String, Integer, Float, Text, ForeignKey, Index, Uuid

from flatscout.models.base import Base, TimestampMixin, UUIDMixin

FURNISHING_OPTIONS = ("Furnished", "Semi-Furnished", "Unfurnished")


class FlatListing(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "flat_listings"

    title = Column(String(255), nullable=False)
    location = Column(String(255), nullable=False)
    address = Column(Text, nullable=False)
    city = Column(String(100), nullable=False, index=True)
    state = Column(String(100), nullable=False)
    pincode = Column(String(20), nullable=False)

    price = Column(String(50), nullable=False)  # free text, e.g. "12000/month"
    bedrooms = Column(Integer, nullable=False)
    bathrooms = Column(Integer, nullable=False)
    area = Column(Float, nullable=False)
    furnished = Column(String(20), nullable=False)

    image = Column(Text, default="", nullable=False)
    description = Column(Text, default="", nullable=False)

    contact_name = Column(String(100), nullable=False)
    contact_phone = Column(String(30), nullable=False)
    contact_email = Column(String(255), nullable=False)

    created_by_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="SET NULL"), index=True)

    __table_args__ = (
        Index("idx_flat_listings_city_created", "city", "created_at"),
    )
