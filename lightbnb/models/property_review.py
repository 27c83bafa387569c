from sqlalchemy import Column, Integer, SmallInteger, Text, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base


class PropertyReview(Base):
    __tablename__ = "property_reviews"

    id = Column(Integer, primary_key=True)
    guest_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    property_id = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True)
    reservation_id = Column(Integer, ForeignKey("reservations.id", ondelete="CASCADE"), nullable=False)
    rating = Column(SmallInteger, nullable=False, default=0)  # 1..5
    message = Column(Text)

    # Relationships
    property = relationship("Property", back_populates="reviews")
