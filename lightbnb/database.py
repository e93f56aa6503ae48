"""
Database engine management and the store client used by the query layer.
Statements are textual SQL with $n positional parameters, executed through async SQLAlchemy on asyncpg.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy import Integer
from lightbnb.config import Settings, settings as default_settings
from lightbnb.utils.exceptions import ConstraintViolationError
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Sequence
import logging
import time

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all table models.
    Every LightBnB table has a serial integer primary key.
    """
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    
    def __repr__(self) -> str:
        """String representation of the model."""
        return f"<{self.__class__.__name__}(id={self.id})>"


@dataclass
class QueryResult:
    """Rows returned by one statement, each as a column-name keyed dict."""
    rows: List[Dict[str, Any]] = field(default_factory=list)
    
    @property
    def first(self) -> Optional[Dict[str, Any]]:
        return self.rows[0] if self.rows else None


class StoreClient(Protocol):
    """Anything that can run one parameterized statement and return its rows."""
    
    async def execute(self, query_text: str, params: Sequence[Any] = ()) -> QueryResult:
        ...


def _constraint_name(exception: IntegrityError) -> Optional[str]:
    """Dig the violated constraint name out of the driver error, if it carries one."""
    for error in (exception.orig, getattr(exception.orig, "__cause__", None)):
        name = getattr(error, "constraint_name", None)
        if name:
            return name
    return None


class SQLAlchemyStoreClient:
    """
    Store client backed by an async SQLAlchemy engine.
    
    Each call is one round trip in its own transaction, so INSERT ... RETURNING
    is committed before the rows are handed back.
    """
    
    def __init__(self, engine: AsyncEngine, slow_query_threshold: float = 1.0):
        """
        Initialize the client with an engine.
        
        Args:
            engine: Async engine using a driver with numeric ($n) paramstyle
            slow_query_threshold: Seconds after which a statement is logged as slow
        """
        self.engine = engine
        self.slow_query_threshold = slow_query_threshold
    
    async def execute(self, query_text: str, params: Sequence[Any] = ()) -> QueryResult:
        """
        Execute a statement and collect its rows.
        
        Args:
            query_text: SQL text with $n placeholders
            params: Positional parameter values
            
        Returns:
            QueryResult with one dict per row; when two selected columns share a
            name the later one wins
            
        Raises:
            ConstraintViolationError: If the store rejects the statement for an integrity constraint
        """
        start_time = time.perf_counter()
        try:
            async with self.engine.begin() as conn:
                result = await conn.exec_driver_sql(query_text, tuple(params))
                rows = []
                if result.returns_rows:
                    columns = list(result.keys())
                    rows = [dict(zip(columns, row)) for row in result]
        except IntegrityError as e:
            logger.error(f"Constraint violation: {e.orig}")
            raise ConstraintViolationError(str(e.orig), constraint=_constraint_name(e)) from e
        
        execution_time = time.perf_counter() - start_time
        if execution_time > self.slow_query_threshold:
            logger.warning(f"Slow query detected: {execution_time:.3f}s - {' '.join(query_text.split())[:100]}...")
        else:
            logger.debug(f"Query returned {len(rows)} rows in {execution_time:.3f}s")
        
        return QueryResult(rows=rows)


def create_engine_from_settings(settings: Optional[Settings] = None, testing: bool = False) -> AsyncEngine:
    """
    Create the async engine described by settings.
    
    Args:
        settings: Settings instance, defaults to the global settings
        testing: Use the test database URL and a smaller pool
    """
    settings = settings or default_settings
    url = settings.test_database_url if testing else settings.database_url
    
    return create_async_engine(
        url,
        echo=settings.debug,
        pool_size=5 if testing else 10,
        max_overflow=10 if testing else 20,
        pool_pre_ping=True,  # Validate connections before use
        pool_recycle=300 if testing else 3600,
    )


def create_store_client(settings: Optional[Settings] = None, engine: Optional[AsyncEngine] = None) -> SQLAlchemyStoreClient:
    """Build a store client from settings, reusing an engine when one is given."""
    settings = settings or default_settings
    return SQLAlchemyStoreClient(
        engine or create_engine_from_settings(settings),
        slow_query_threshold=settings.slow_query_threshold,
    )


async def test_database_connection(store: StoreClient) -> bool:
    """
    Test database connectivity.
    Returns True if connection is successful, False otherwise.
    """
    try:
        result = await store.execute("SELECT 1 AS ok")
        logger.info("Database connection successful")
        return result.first is not None
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all LightBnB tables.
    Used for development databases and integration tests.
    """
    # Register every model on the metadata
    import lightbnb.models  # noqa: F401
    
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created successfully")


async def drop_tables(engine: AsyncEngine, settings: Optional[Settings] = None) -> None:
    """
    Drop all LightBnB tables.
    This should only be used in testing or development.
    """
    settings = settings or default_settings
    if settings.is_production:
        raise RuntimeError("Cannot drop tables in production environment")
    
    import lightbnb.models  # noqa: F401
    
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        logger.info("Database tables dropped successfully")


async def close_db_connection(engine: AsyncEngine) -> None:
    """
    Close database connection.
    This should be called during application shutdown.
    """
    await engine.dispose()
    logger.info("Database connections closed")
