"""
Database management command line interface.
Creates or drops the LightBnB tables, checks connectivity and loads a small sample data set.
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from lightbnb.config import settings
from lightbnb.database import (
    close_db_connection,
    create_engine_from_settings,
    create_store_client,
    create_tables,
    drop_tables,
    test_database_connection,
)
from lightbnb.logging_config import configure_logging
from lightbnb.queries import create_queries

logger = logging.getLogger(__name__)

SAMPLE_USERS = [
    {"name": "Devin Sanders", "email": "tristanjacobs@gmail.com", "password": "$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u."},
    {"name": "Suzanne Olson", "email": "allisonjackson@mail.com", "password": "$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u."},
]

SAMPLE_PROPERTIES = [
    {
        "title": "Speed lamp",
        "description": "description",
        "thumbnail_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg?auto=compress&cs=tinysrgb&h=350",
        "cover_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg",
        "cost_per_night": 93061,
        "parking_spaces": 6,
        "number_of_bathrooms": 4,
        "number_of_bedrooms": 8,
        "country": "Canada",
        "street": "536 Namsub Highway",
        "city": "Sotboske",
        "province": "Quebec",
        "post_code": "28142",
    },
    {
        "title": "Habit mix",
        "description": "description",
        "thumbnail_photo_url": "https://images.pexels.com/photos/2121121/pexels-photo-2121121.jpeg?auto=compress&cs=tinysrgb&h=350",
        "cover_photo_url": "https://images.pexels.com/photos/2121121/pexels-photo-2121121.jpeg",
        "cost_per_night": 8500,
        "parking_spaces": 1,
        "number_of_bathrooms": 1,
        "number_of_bedrooms": 2,
        "country": "Canada",
        "street": "651 Nami Road",
        "city": "Vancouver",
        "province": "British Columbia",
        "post_code": "V5K 0A1",
    },
]


async def seed_database(testing: bool = False) -> None:
    """Insert the sample users and give each one a property."""
    engine = create_engine_from_settings(settings, testing=testing)
    queries = create_queries(create_store_client(settings, engine=engine))
    try:
        for user_data, property_data in zip(SAMPLE_USERS, SAMPLE_PROPERTIES):
            user = await queries.find_user_by_email(user_data["email"])
            if user:
                logger.info(f"Sample user {user_data['email']} already exists, skipping")
                continue
            user = await queries.create_user(user_data)
            await queries.create_property({**property_data, "owner_id": user["id"]})
        logger.info("Sample data loaded")
    finally:
        await close_db_connection(engine)


async def run_create_tables(testing: bool = False) -> None:
    engine = create_engine_from_settings(settings, testing=testing)
    try:
        await create_tables(engine)
    finally:
        await close_db_connection(engine)


async def run_drop_tables(testing: bool = False) -> None:
    engine = create_engine_from_settings(settings, testing=testing)
    try:
        await drop_tables(engine, settings)
    finally:
        await close_db_connection(engine)


async def run_check(testing: bool = False) -> bool:
    engine = create_engine_from_settings(settings, testing=testing)
    try:
        return await test_database_connection(create_store_client(settings, engine=engine))
    finally:
        await close_db_connection(engine)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lightbnb-db", description="LightBnB database management")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    
    for name, help_text in (
        ("create-tables", "Create all tables"),
        ("seed", "Load sample users and properties"),
        ("check", "Check database connectivity"),
    ):
        command_parser = subparsers.add_parser(name, help=help_text)
        command_parser.add_argument("--test", action="store_true", help="Use the test database")
    
    drop_parser = subparsers.add_parser("drop-tables", help="Drop all tables (development only)")
    drop_parser.add_argument("--test", action="store_true", help="Use the test database")
    drop_parser.add_argument("--confirm", action="store_true", help="Confirm dropping tables")
    
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI interface for database management."""
    parser = build_parser()
    args = parser.parse_args(argv)
    
    if not args.command:
        parser.print_help()
        return 1
    
    configure_logging(settings)
    
    try:
        if args.command == "create-tables":
            asyncio.run(run_create_tables(testing=args.test))
        
        elif args.command == "drop-tables":
            if not args.confirm:
                print("Dropping tables requires --confirm flag")
                return 1
            asyncio.run(run_drop_tables(testing=args.test))
        
        elif args.command == "seed":
            asyncio.run(seed_database(testing=args.test))
        
        elif args.command == "check":
            if not asyncio.run(run_check(testing=args.test)):
                return 1
    
    except Exception as e:
        logger.error(f"Command failed: {e}")
        return 1
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
