"""
Property repository for filtered property search and listing creation.
Search statements are assembled with SelectQuery so that filters can be applied in any combination.
"""

from lightbnb.repositories.base import BaseRepository
from lightbnb.schemas.property import PropertyCreate, PropertySearchOptions
from lightbnb.utils.query_builder import SelectQuery
from lightbnb.utils.validators import coerce_limit, to_minor_units, validate_schema
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union
import logging

logger = logging.getLogger(__name__)

# Column order of INSERT statements; parameters are bound in this order
PROPERTY_COLUMNS = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
    "country",
    "street",
    "city",
    "province",
    "post_code",
)


class PropertyRepository(BaseRepository):
    """Repository for the properties table."""
    
    table_name = "properties"
    
    def build_search_query(
        self,
        options: PropertySearchOptions,
        limit: int = 10
    ) -> Tuple[str, List[Any]]:
        """
        Build the search statement for validated options.
        
        Prices are converted from dollars to cents. The rating filter applies to
        the per-property average, so it goes to HAVING after grouping.
        
        Args:
            options: Validated search options
            limit: Maximum number of rows
            
        Returns:
            Tuple of (query text, positional parameters)
        """
        query = SelectQuery(
            select="""
            SELECT properties.*, AVG(property_reviews.rating) AS average_rating
            FROM properties
            LEFT JOIN property_reviews ON property_reviews.property_id = properties.id
            """,
            group_by="properties.id",
            order_by="properties.cost_per_night",
        )
        
        if options.city:
            query.where("properties.city ILIKE {}", f"%{options.city}%")
        if options.owner_id is not None:
            query.where("properties.owner_id = {}", options.owner_id)
        if options.minimum_price_per_night is not None:
            query.where("properties.cost_per_night >= {}", to_minor_units(options.minimum_price_per_night))
        if options.maximum_price_per_night is not None:
            query.where("properties.cost_per_night <= {}", to_minor_units(options.maximum_price_per_night))
        if options.minimum_rating is not None:
            query.having("AVG(property_reviews.rating) >= {}", options.minimum_rating)
        
        return query.render(limit=limit)
    
    async def search_properties(
        self,
        options: Optional[Union[PropertySearchOptions, Mapping[str, Any]]] = None,
        limit: int = 10
    ) -> List[Dict[str, Any]]:
        """
        Search properties with optional filters, cheapest first.
        
        Args:
            options: city, owner_id, minimum_price_per_night,
                     maximum_price_per_night and minimum_rating, all optional
            limit: Maximum number of records to return
            
        Returns:
            List of property records with their average_rating
            
        Raises:
            MalformedInputError: If a numeric option cannot be coerced
        """
        search_options = validate_schema(PropertySearchOptions, options or {})
        limit = coerce_limit(limit)
        
        query_text, params = self.build_search_query(search_options, limit)
        properties = await self.fetch_all(query_text, params)
        
        filters = "no filters" if search_options.is_empty else search_options.model_dump(exclude_none=True)
        logger.debug(f"Property search returned {len(properties)} results for {filters}")
        return properties
    
    async def create_property(self, property_data: Union[PropertyCreate, Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Insert a new property.
        
        Args:
            property_data: Dictionary containing property information
            
        Returns:
            Created property record including its generated id
            
        Raises:
            MalformedInputError: If a numeric field cannot be coerced
            ConstraintViolationError: If the owner does not exist or a required column is missing
        """
        new_property = validate_schema(PropertyCreate, property_data)
        
        columns = ", ".join(PROPERTY_COLUMNS)
        placeholders = ", ".join(f"${position}" for position in range(1, len(PROPERTY_COLUMNS) + 1))
        query_text = f"""
        INSERT INTO properties ({columns})
        VALUES ({placeholders})
        RETURNING *;
        """
        params = [getattr(new_property, column) for column in PROPERTY_COLUMNS]
        
        created_property = await self.fetch_one(query_text, params)
        logger.info(f"Created property: {created_property['title']} (ID: {created_property['id']})")
        return created_property
