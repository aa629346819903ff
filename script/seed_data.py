#!/usr/bin/env python3
"""
Database Seed Script
Populate demo data into the database

Features:
1. Create Event - one event bookings can be attached to
2. Create Accommodations - two properties with a handful of rooms each
3. Print Tokens - bearer tokens for an admin, an organizer and a participant

Notes:
- Users live in another service; tokens carry the identity the API trusts
- Run `python script/reset_database.py` first for an empty schema
"""

import asyncio
from dataclasses import dataclass, field
from decimal import Decimal

from sqlalchemy import text

from src.platform.database.db_setting import Database, dispose_engine
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.accommodation.app.command.add_room_use_case import AddRoomUseCase
from src.service.accommodation.app.command.create_accommodation_use_case import (
    CreateAccommodationUseCase,
)
from src.service.accommodation.domain.entity.user_entity import UserEntity, UserRole
from src.service.accommodation.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


@dataclass
class AccommodationConfig:
    name: str
    location: str
    price_per_night: str
    rooms: list[tuple[str, str]] = field(default_factory=list)


SEED_ACCOMMODATIONS = [
    AccommodationConfig(
        name='Harbour View Hotel',
        location='Keelung',
        price_per_night='120.00',
        rooms=[('101', 'single'), ('102', 'double'), ('201', 'suite')],
    ),
    AccommodationConfig(
        name='Mountain Lodge',
        location='Hsinchu',
        price_per_night='85.50',
        rooms=[('A1', 'double'), ('A2', 'double'), ('D1', 'dormitory')],
    ),
]

SEED_USERS = [
    UserEntity(id=1, role=UserRole.ADMIN, name='init admin', email='admin@t.com'),
    UserEntity(id=2, role=UserRole.ORGANIZER, name='init organizer', email='organizer@t.com'),
    UserEntity(id=3, role=UserRole.PARTICIPANT, name='init participant', email='p@t.com'),
]


async def create_event(database: Database) -> int:
    print('🎫 Creating event...')
    async with database.session() as session:
        event_id = await session.scalar(
            text(
                'INSERT INTO events (title, location, start_date, end_date) '
                "VALUES ('PyCon Taiwan', 'Taipei', CURRENT_DATE + 30, CURRENT_DATE + 33) "
                'RETURNING id'
            )
        )
        await session.commit()
    print(f'   ✅ Created event: ID={event_id}')
    return event_id


async def create_accommodations(database: Database) -> None:
    print(f'🏨 Creating {len(SEED_ACCOMMODATIONS)} accommodations...')
    for config in SEED_ACCOMMODATIONS:
        accommodation = await CreateAccommodationUseCase(
            uow=SqlAlchemyUnitOfWork(session_factory=database.session)
        ).execute(
            name=config.name,
            location=config.location,
            total_rooms=len(config.rooms),
            price_per_night=Decimal(config.price_per_night),
        )
        for room_number, room_type in config.rooms:
            await AddRoomUseCase(
                uow=SqlAlchemyUnitOfWork(session_factory=database.session)
            ).execute(
                accommodation_id=accommodation.id, room_number=room_number, room_type=room_type
            )
        print(
            f'   ✅ Created accommodation: ID={accommodation.id}, Name={accommodation.name}, '
            f'Rooms={len(config.rooms)}'
        )


def print_tokens() -> None:
    print('🔑 Bearer tokens:')
    jwt_auth = JwtAuth()
    for user in SEED_USERS:
        print(f'   {user.role.value}: {jwt_auth.create_jwt_token(user)}')


async def main():
    print('🌱 Starting data seeding...')
    print('=' * 50)

    database = Database()
    try:
        await create_event(database)
        await create_accommodations(database)
        print()
        print_tokens()
        print('=' * 50)
        print('🌱 Data seeding completed!')

    except Exception as e:
        print(f'❌ Seeding failed: {e}')
        exit(1)

    finally:
        await dispose_engine()


if __name__ == '__main__':
    asyncio.run(main())
