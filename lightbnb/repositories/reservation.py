"""
Reservation repository for a guest's reservation history.
"""

from lightbnb.repositories.base import BaseRepository
from lightbnb.utils.validators import coerce_int, coerce_limit
from typing import Any, Dict, List
import logging

logger = logging.getLogger(__name__)

PAST_RESERVATIONS_QUERY = """
SELECT properties.*, reservations.*, AVG(property_reviews.rating) AS average_rating
FROM reservations
JOIN properties ON reservations.property_id = properties.id
LEFT JOIN property_reviews ON properties.id = property_reviews.property_id
WHERE reservations.guest_id = $1
  AND reservations.end_date < now()::date
GROUP BY properties.id, reservations.id
ORDER BY reservations.start_date
LIMIT $2;
"""


class ReservationRepository(BaseRepository):
    """Repository for the reservations table."""
    
    table_name = "reservations"
    
    async def get_past_reservations(self, guest_id: Any, limit: int = 10) -> List[Dict[str, Any]]:
        """
        Get a guest's finished reservations with property details.
        
        Each record carries the property's columns, then the reservation's
        (so "id" is the reservation id), plus the property's average rating.
        Only reservations that ended before today are returned, oldest start first.
        
        Args:
            guest_id: Id of the guest, coerced to int
            limit: Maximum number of records to return
            
        Returns:
            List of reservation records
        """
        guest_id = coerce_int(guest_id, "guest_id")
        limit = coerce_limit(limit)
        
        reservations = await self.fetch_all(PAST_RESERVATIONS_QUERY, [guest_id, limit])
        logger.debug(f"Retrieved {len(reservations)} past reservations for guest {guest_id}")
        return reservations
