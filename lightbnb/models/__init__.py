"""
Table models for the LightBnB schema: users, properties, reservations and property reviews.
"""

from lightbnb.models.user import User
from lightbnb.models.property import Property
from lightbnb.models.reservation import Reservation
from lightbnb.models.review import PropertyReview

__all__ = [
    "User",
    "Property",
    "Reservation",
    "PropertyReview",
]
