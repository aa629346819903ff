#!/usr/bin/env python3
"""
Database Reset Script
Reset the PostgreSQL schema of the accommodation service

Features:
1. Drop & Recreate Database - completely wipe the database
2. Run Alembic Migrations - create the latest schema (btree_gist + no-overlap constraint)

Notes:
- This script only resets database structure, does not seed data
- To seed demo data, run `python script/seed_data.py`
"""

import asyncio
import subprocess

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine

from src.platform.config.core_setting import settings
from src.platform.constant.path import ALEMBIC_INI, BASE_DIR


async def _drop_and_create_db() -> None:
    url = make_url(settings.DATABASE_URL_ASYNC)
    db_name = url.database
    admin_engine = create_async_engine(url.set(database='postgres'), isolation_level='AUTOCOMMIT')

    try:
        async with admin_engine.connect() as conn:
            await conn.execute(
                text(
                    'SELECT pg_terminate_backend(pid) FROM pg_stat_activity '
                    'WHERE datname = :name AND pid <> pg_backend_pid()'
                ),
                {'name': db_name},
            )
            await conn.execute(text(f'DROP DATABASE IF EXISTS "{db_name}"'))
            print(f"   ✅ Database '{db_name}' dropped")

            await conn.execute(text(f'CREATE DATABASE "{db_name}"'))
            print(f"   ✅ Database '{db_name}' created")
    finally:
        await admin_engine.dispose()


def _run_alembic_migrations() -> None:
    print("   🔄 Running 'alembic upgrade head'...")

    result = subprocess.run(
        ['alembic', '-c', str(ALEMBIC_INI), 'upgrade', 'head'],
        cwd=BASE_DIR,
        capture_output=True,
        text=True,
    )

    if result.returncode != 0:
        print(f'   ❌ Migration failed (return code: {result.returncode})')
        if result.stdout:
            print(f'   📋 STDOUT: {result.stdout}')
        if result.stderr:
            print(f'   📋 STDERR: {result.stderr}')
        raise RuntimeError(f'Alembic migration failed with return code {result.returncode}')

    print('   ✅ Database migrations completed')


async def main():
    print('🔄 Starting database reset...')
    print('=' * 50)
    print(f'Database URL: {settings.DATABASE_URL_ASYNC}')

    try:
        print('🗑️ Dropping database...')
        await _drop_and_create_db()

        print('🏗️ Running database migrations...')
        _run_alembic_migrations()

        print('=' * 50)
        print('✅ Database reset completed!')
        print('💡 To seed demo data, run: python script/seed_data.py')

    except Exception as e:
        print(f'❌ Reset failed: {e}')
        exit(1)


if __name__ == '__main__':
    asyncio.run(main())
