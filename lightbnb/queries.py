"""
Query module: the data access entry point for the LightBnB web application.

    store = create_store_client()
    queries = create_queries(store)
    user = await queries.find_user_by_email("tristanjacobs@gmail.com")

Every operation is one parameterized statement and one round trip to the
store. Missing rows come back as None or an empty list; store failures
propagate unchanged.
"""

from lightbnb.config import settings
from lightbnb.database import StoreClient
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.user import UserRepository
from lightbnb.schemas.property import PropertyCreate, PropertySearchOptions
from lightbnb.schemas.user import UserCreate
from typing import Any, Dict, List, Mapping, Optional, Union


class QueryModule:
    """Facade over the user, reservation and property repositories sharing one store client."""
    
    def __init__(self, store: StoreClient, default_limit: Optional[int] = None):
        self.store = store
        self.default_limit = default_limit or settings.default_result_limit
        self.users = UserRepository(store)
        self.reservations = ReservationRepository(store)
        self.properties = PropertyRepository(store)
    
    # Users
    
    async def find_user_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """Get a single user by email, or None."""
        return await self.users.get_by_email(email)
    
    async def find_user_by_id(self, user_id: Any) -> Optional[Dict[str, Any]]:
        """Get a single user by id, or None."""
        return await self.users.get_by_id(user_id)
    
    async def create_user(self, user: Union[UserCreate, Mapping[str, Any]]) -> Dict[str, Any]:
        """Add a new user; a duplicate email raises ConstraintViolationError."""
        return await self.users.create_user(user)
    
    # Reservations
    
    async def list_guest_reservations(self, guest_id: Any, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Get a guest's past reservations, oldest first."""
        return await self.reservations.get_past_reservations(guest_id, self._limit(limit))
    
    # Properties
    
    async def search_properties(
        self,
        options: Optional[Union[PropertySearchOptions, Mapping[str, Any]]] = None,
        limit: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """Search properties by filter options, cheapest first."""
        return await self.properties.search_properties(options, self._limit(limit))
    
    async def create_property(self, property_data: Union[PropertyCreate, Mapping[str, Any]]) -> Dict[str, Any]:
        """Add a property listing."""
        return await self.properties.create_property(property_data)
    
    def _limit(self, limit: Optional[int]) -> Any:
        return self.default_limit if limit is None else limit


def create_queries(store: StoreClient, default_limit: Optional[int] = None) -> QueryModule:
    """Build the query module over a store client."""
    return QueryModule(store, default_limit=default_limit)
