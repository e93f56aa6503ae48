"""
Property model for rental listings.
Prices are stored as integer cents; counts are plain integers.
"""

from sqlalchemy import String, Text, Integer, Boolean, ForeignKey, Index, text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from lightbnb.database import Base
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from lightbnb.models.user import User
    from lightbnb.models.reservation import Reservation
    from lightbnb.models.review import PropertyReview


class Property(Base):
    """
    Property listing owned by a user.
    """
    
    __tablename__ = "properties"
    
    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    
    # Listing details
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    thumbnail_photo_url: Mapped[str] = mapped_column(String(255), nullable=False)
    cover_photo_url: Mapped[str] = mapped_column(String(255), nullable=False)
    
    cost_per_night: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        server_default=text("0"),
        comment="Nightly price in cents"
    )
    
    parking_spaces: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("0"))
    number_of_bathrooms: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("0"))
    number_of_bedrooms: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("0"))
    
    # Address
    country: Mapped[str] = mapped_column(String(255), nullable=False)
    street: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(255), nullable=False)
    province: Mapped[str] = mapped_column(String(255), nullable=False)
    post_code: Mapped[str] = mapped_column(String(255), nullable=False)
    
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("true"))
    
    # Relationships
    owner: Mapped["User"] = relationship("User", back_populates="properties")
    
    reservations: Mapped[List["Reservation"]] = relationship(
        "Reservation",
        back_populates="property",
        cascade="all, delete-orphan"
    )
    
    reviews: Mapped[List["PropertyReview"]] = relationship(
        "PropertyReview",
        back_populates="property",
        cascade="all, delete-orphan"
    )
    
    __table_args__ = (
        # Search filters on city and orders by price
        Index("idx_properties_city", "city"),
        Index("idx_properties_cost_per_night", "cost_per_night"),
    )
    
    def __repr__(self) -> str:
        return f"<Property(id={self.id}, title={self.title}, city={self.city})>"
