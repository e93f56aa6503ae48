"""
User repository for lookups by email or id and account creation.
"""

from lightbnb.repositories.base import BaseRepository
from lightbnb.schemas.user import UserCreate
from lightbnb.utils.validators import coerce_int, validate_schema
from typing import Any, Dict, Mapping, Optional, Union
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository):
    """Repository for the users table."""
    
    table_name = "users"
    
    async def get_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """
        Get user by email address.
        
        Args:
            email: Email address to search for, matched exactly
            
        Returns:
            User record if found, None otherwise
        """
        query_text = """
        SELECT *
        FROM users
        WHERE email = $1;
        """
        user = await self.fetch_one(query_text, [email])
        
        if user:
            logger.debug(f"Retrieved user by email: {email}")
        else:
            logger.debug(f"User with email {email} not found")
        
        return user
    
    async def get_by_id(self, user_id: Any) -> Optional[Dict[str, Any]]:
        """
        Get user by id.
        
        Args:
            user_id: Id of the user, coerced to int
            
        Returns:
            User record if found, None otherwise
        """
        user_id = coerce_int(user_id, "user_id")
        query_text = """
        SELECT *
        FROM users
        WHERE id = $1;
        """
        user = await self.fetch_one(query_text, [user_id])
        
        if not user:
            logger.debug(f"User with id {user_id} not found")
        
        return user
    
    async def create_user(self, user_data: Union[UserCreate, Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Insert a new user.
        
        Args:
            user_data: name, email and password (already hashed)
            
        Returns:
            Created user record including its generated id
            
        Raises:
            MalformedInputError: If a required field is missing
            ConstraintViolationError: If the email is already registered
        """
        user = validate_schema(UserCreate, user_data)
        query_text = """
        INSERT INTO users (name, email, password)
        VALUES ($1, $2, $3)
        RETURNING *;
        """
        created_user = await self.fetch_one(query_text, [user.name, user.email, user.password])
        logger.info(f"Created user: {created_user['email']} (ID: {created_user['id']})")
        return created_user
