"""
LightBnB data access layer.
"""

from lightbnb.queries import QueryModule, create_queries

__all__ = ["QueryModule", "create_queries"]
