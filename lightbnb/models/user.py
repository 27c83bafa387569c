from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from .base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    password = Column(String(255), nullable=False)

    # Relationships
    properties = relationship("Property", back_populates="owner", passive_deletes=True)
    reservations = relationship("Reservation", back_populates="guest", passive_deletes=True)

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
