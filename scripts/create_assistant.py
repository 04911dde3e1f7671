#!/usr/bin/env python3
"""
Create an assistant account directly in the database.

Usage:
    python scripts/create_assistant.py --id a1 --name "Sara" --password secret

Options:
    --phone      Phone number
    --role       Role (default: assistant)
"""

import argparse
import asyncio
import getpass
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from assistant_accounts.config import load_config
from assistant_accounts.database.repository import AssistantRepository
from assistant_accounts.models.assistant import Assistant
from assistant_accounts.security.passwords import hash_password
from assistant_accounts.security.sanitizer import Sanitizer


async def create(args) -> int:
    config = load_config()
    sanitizer = Sanitizer(max_depth=config.security.max_payload_depth)

    assistant_id = sanitizer.sanitize_string(args.id, "id")
    password = args.password or getpass.getpass("Password: ")

    repo = AssistantRepository(config.mongo)
    await repo.connect()
    try:
        if await repo.exists(assistant_id):
            print(f"Assistant {assistant_id} already exists")
            return 1

        assistant = Assistant(
            id=assistant_id,
            name=sanitizer.sanitize_string(args.name, "name"),
            phone=sanitizer.sanitize_string(args.phone, "phone"),
            role=sanitizer.sanitize_string(args.role, "role"),
            password=hash_password(password, config.security.bcrypt_rounds),
        )
        await repo.create_assistant(assistant.to_document())
        print(f"Created assistant {assistant_id}")
        return 0
    finally:
        await repo.disconnect()


def main():
    parser = argparse.ArgumentParser(description="Create an assistant account")
    parser.add_argument("--id", required=True)
    parser.add_argument("--name", required=True)
    parser.add_argument("--password")
    parser.add_argument("--phone")
    parser.add_argument("--role", default="assistant")
    sys.exit(asyncio.run(create(parser.parse_args())))


if __name__ == "__main__":
    main()
