from sqlalchemy import Column, Integer, String, Text, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base


class Property(Base):
    __tablename__ = "properties"

    id = Column(Integer, primary_key=True)
    owner_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    thumbnail_photo_url = Column(String(255), nullable=False)
    cover_photo_url = Column(String(255), nullable=False)
    cost_per_night = Column(Integer, nullable=False, default=0)  # minor units (cents)
    parking_spaces = Column(Integer, nullable=False, default=0)
    number_of_bathrooms = Column(Integer, nullable=False, default=0)
    number_of_bedrooms = Column(Integer, nullable=False, default=0)
    country = Column(String(255), nullable=False)
    street = Column(String(255), nullable=False)
    city = Column(String(255), nullable=False, index=True)
    province = Column(String(255), nullable=False)
    post_code = Column(String(255), nullable=False)
    active = Column(Boolean, nullable=False, default=True)

    # Relationships
    owner = relationship("User", back_populates="properties")
    reservations = relationship("Reservation", back_populates="property", passive_deletes=True)
    reviews = relationship("PropertyReview", back_populates="property", passive_deletes=True)
