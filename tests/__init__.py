"""
LightBnB data access test suite.

- test_queries / test_repositories: query module operations against a recording store
- test_query_builder, test_validators, test_config: unit tests for helpers
- test_database: SQLAlchemy store client with a mocked engine
- test_integration_queries: end-to-end against PostgreSQL (needs TEST_DATABASE_URL)
"""
