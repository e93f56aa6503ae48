"""
Base repository class owning the single store round trip of every query.
Specific repositories build SQL text and positional parameters and hand them here.
"""

from lightbnb.database import StoreClient
from typing import Any, Dict, List, Optional, Sequence
import logging

logger = logging.getLogger(__name__)


class BaseRepository:
    """
    Base repository providing row fetching on top of a store client.
    Failures are logged and re-raised unchanged.
    """
    
    # Table name used in log messages
    table_name: str = ""
    
    def __init__(self, store: StoreClient):
        """
        Initialize repository with a store client.
        
        Args:
            store: Client executing parameterized SQL
        """
        self.store = store
    
    async def fetch_all(self, query_text: str, params: Sequence[Any]) -> List[Dict[str, Any]]:
        """
        Run a statement and return all rows.
        
        Args:
            query_text: SQL text with $n placeholders
            params: Positional parameter values
            
        Returns:
            List of row dictionaries, empty if nothing matched
        """
        try:
            result = await self.store.execute(query_text, list(params))
            logger.debug(f"Retrieved {len(result.rows)} {self.table_name} records")
            return result.rows
        except Exception as e:
            logger.error(f"Failed to query {self.table_name}: {e}")
            raise
    
    async def fetch_one(self, query_text: str, params: Sequence[Any]) -> Optional[Dict[str, Any]]:
        """
        Run a statement and return its first row.
        
        Returns:
            First row dictionary, or None if nothing matched
        """
        try:
            result = await self.store.execute(query_text, list(params))
            return result.first
        except Exception as e:
            logger.error(f"Failed to query {self.table_name}: {e}")
            raise
