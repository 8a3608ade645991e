"""Database Seed Script - Registers a few sample endpoints"""
import asyncio
import json
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.database import AsyncSessionLocal, init_db
from app.config import settings
from app.services.endpoint_service import EndpointRegistry
from app.services.store import HttpLogStore

SEED_ADDRESS = "127.0.0.1"

SAMPLE_ENDPOINTS = {
    "greet": {"hello": "world"},
    "status": {"status": "ok", "uptime": 12345},
    "users": [
        {"id": 1, "name": "Alice"},
        {"id": 2, "name": "Bob"},
    ],
}


async def seed_database(session_factory=AsyncSessionLocal):
    """Register SAMPLE_ENDPOINTS, skipping keys that already have an endpoint"""
    print("=" * 60)
    print("DATABASE SEEDING STARTED")
    print("=" * 60)

    created = []
    async with session_factory() as session:
        store = HttpLogStore(session)
        registry = EndpointRegistry(store)

        for key, body in SAMPLE_ENDPOINTS.items():
            if await store.get_current_endpoint(key) is not None:
                print(f"   - Skipped: {key} (already registered)")
                continue

            payload = json.dumps(body).encode("utf-8")
            await registry.create(key, payload, SEED_ADDRESS)
            created.append(key)
            print(f"   ✓ Created: /api/{key}")

    print("\n" + "=" * 60)
    print(f"✅ DATABASE SEEDING COMPLETED ({len(created)} endpoint(s) created)")
    print("=" * 60)

    print("\n📝 SAMPLE API REQUESTS:")
    print(f"   • GET  http://localhost:{settings.PORT}/api/greet")
    print(f"   • GET  http://localhost:{settings.PORT}/api/greet/logs")
    print(f"   • GET  http://localhost:{settings.PORT}/api/greet/logs.txt?offset=0")
    return created


async def main():
    """Main entry point"""
    try:
        await init_db()
        await seed_database()
    except Exception as e:
        print(f"\n❌ Seeding failed: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
