#!/usr/bin/env python3
"""
Script to register a seller, buyer or admin.

Identity is issued upstream; this only records the party in the ledger so
deliveries and statements can reference it.

Usage:
  python scripts/create_user.py --name "Ramesh" --mobile 9876543210 --role seller
"""

import asyncio
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.application.errors import AppError
from src.config.settings import get_settings
from src.domain.models.user import User
from src.domain.value_objects.role import Role
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)


async def create_user(name: str, mobile: str, role: Role) -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)

    try:
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            user = await uow.users.add(User.create(name=name, mobile=mobile, role=role))
            await uow.commit()

        print("\n✅ User created successfully!")
        print(f"   User ID: {user.id}")
        print(f"   Name: {user.name}")
        print(f"   Mobile: {user.mobile}")
        print(f"   Role: {user.role.value}")
        print("\n   Send these headers from the gateway:")
        print(f"   {settings.caller_id_header}: {user.id}")
        print(f"   {settings.caller_role_header}: {user.role.value}")
    except AppError as exc:
        print(f"\n❌ Error creating user: {exc.message}")
        sys.exit(1)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Register a ledger user")
    parser.add_argument("--name", required=True, help="Display name")
    parser.add_argument("--mobile", required=True, help="Mobile number (unique)")
    parser.add_argument(
        "--role",
        default=Role.SELLER.value,
        choices=[r.value for r in Role],
        help="Role of the user (default: seller)",
    )

    args = parser.parse_args()

    asyncio.run(create_user(args.name, args.mobile.strip(), Role(args.role)))
