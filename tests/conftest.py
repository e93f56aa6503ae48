"""
Test configuration and fixtures for the LightBnB data access layer.
Provides a recording store client, query module fixtures and test data factories.
"""

import pytest
import uuid
from typing import Any, Dict, List, Optional, Sequence

from lightbnb.database import QueryResult
from lightbnb.queries import QueryModule, create_queries
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.user import UserRepository


class FakeStoreClient:
    """
    Store client that records every statement instead of running it.

    Returns `rows` for every call, or the next entry of `responses` when
    scripted responses are given. Raises `error` when one is set.
    """

    def __init__(
        self,
        rows: Optional[List[Dict[str, Any]]] = None,
        error: Optional[Exception] = None,
        responses: Optional[List[List[Dict[str, Any]]]] = None
    ):
        self.rows = rows or []
        self.error = error
        self.responses = list(responses) if responses is not None else None
        self.calls = []

    async def execute(self, query_text: str, params: Sequence[Any] = ()) -> QueryResult:
        self.calls.append((query_text, list(params)))
        if self.error:
            raise self.error
        if self.responses is not None:
            return QueryResult(rows=[dict(row) for row in self.responses.pop(0)])
        return QueryResult(rows=[dict(row) for row in self.rows])

    @property
    def last_query(self) -> str:
        return self.calls[-1][0]

    @property
    def last_params(self) -> List[Any]:
        return self.calls[-1][1]


@pytest.fixture
def fake_store() -> FakeStoreClient:
    """Create an empty recording store."""
    return FakeStoreClient()


@pytest.fixture
def queries(fake_store: FakeStoreClient) -> QueryModule:
    """Create a query module over the recording store."""
    return create_queries(fake_store, default_limit=10)


# Repository fixtures
@pytest.fixture
def user_repository(fake_store: FakeStoreClient) -> UserRepository:
    return UserRepository(fake_store)


@pytest.fixture
def reservation_repository(fake_store: FakeStoreClient) -> ReservationRepository:
    return ReservationRepository(fake_store)


@pytest.fixture
def property_repository(fake_store: FakeStoreClient) -> PropertyRepository:
    return PropertyRepository(fake_store)


# Test data factories
class UserFactory:
    """Factory for user input and rows."""

    @staticmethod
    def create_user_data(
        name: str = "Test User",
        email: str = None,
        password: str = "$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u."
    ) -> dict:
        """Create user data dictionary."""
        return {
            "name": name,
            "email": email or f"test{uuid.uuid4().hex[:8]}@example.com",
            "password": password,
        }

    @staticmethod
    def create_user_row(user_id: int = 1, **overrides) -> dict:
        """Create a users row as the store returns it."""
        return {"id": user_id, **UserFactory.create_user_data(**overrides)}


class PropertyFactory:
    """Factory for property input and rows."""

    @staticmethod
    def create_property_data(
        owner_id: Any = 1,
        title: str = "Test Property",
        city: str = "Vancouver",
        cost_per_night: Any = 10000,
        parking_spaces: Any = 1,
        number_of_bathrooms: Any = 1,
        number_of_bedrooms: Any = 2
    ) -> dict:
        """Create property data dictionary."""
        return {
            "owner_id": owner_id,
            "title": title,
            "description": "A bright test property",
            "thumbnail_photo_url": "https://images.example.com/thumb.jpg",
            "cover_photo_url": "https://images.example.com/cover.jpg",
            "cost_per_night": cost_per_night,
            "parking_spaces": parking_spaces,
            "number_of_bathrooms": number_of_bathrooms,
            "number_of_bedrooms": number_of_bedrooms,
            "country": "Canada",
            "street": "123 Test Street",
            "city": city,
            "province": "British Columbia",
            "post_code": "V5K 0A1",
        }

    @staticmethod
    def create_property_row(property_id: int = 1, **overrides) -> dict:
        """Create a properties row as the store returns it."""
        return {"id": property_id, "active": True, **PropertyFactory.create_property_data(**overrides)}
