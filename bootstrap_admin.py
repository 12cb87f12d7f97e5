#!/usr/bin/env python3
"""
One-time setup: create database tables and the admin account
Run with: poetry run python bootstrap_admin.py

Safe to run repeatedly; an existing admin is left untouched.
"""

import asyncio
from dotenv import load_dotenv

load_dotenv()

from portfolio_api.core import database
from portfolio_api.core.config import settings
from portfolio_api.services.admin_service import admin_service

async def bootstrap() -> bool:
    print("🔧 Bootstrapping Portfolio API...")
    print("=" * 50)

    if database.engine is None:
        print("\n❌ DATABASE_URL is not set!")
        print("   Add it to your .env file and run again")
        return False

    print(f"\n📋 Admin email: {settings.admin_email or '❌ Not set'}")

    try:
        await database.init_db()
        print("✅ Tables created")

        async with database.AsyncSessionLocal() as db:
            admin = await admin_service.ensure_admin(db)

        if admin is None:
            print("\n❌ No admin account could be created")
            print("   Set ADMIN_EMAIL and ADMIN_PASSWORD in your .env file")
            return False

        print(f"✅ Admin account ready: {admin.email}")
        return True

    except Exception as e:
        print(f"\n❌ Bootstrap failed: {str(e)}")
        return False

    finally:
        await database.dispose_db()

if __name__ == "__main__":
    success = asyncio.run(bootstrap())
    exit(0 if success else 1)
