"""
Property review model. Ratings are averaged per property by the search and reservation queries.
"""

from sqlalchemy import SmallInteger, Integer, Text, ForeignKey, text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from lightbnb.database import Base
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from lightbnb.models.property import Property


class PropertyReview(Base):
    """Rating and message left by a guest."""
    
    __tablename__ = "property_reviews"
    
    guest_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False
    )
    
    property_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    
    reservation_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("reservations.id", ondelete="CASCADE")
    )
    
    rating: Mapped[int] = mapped_column(SmallInteger, nullable=False, server_default=text("0"))
    message: Mapped[Optional[str]] = mapped_column(Text)
    
    property: Mapped["Property"] = relationship("Property", back_populates="reviews")
    
    def __repr__(self) -> str:
        return f"<PropertyReview(id={self.id}, property_id={self.property_id}, rating={self.rating})>"
