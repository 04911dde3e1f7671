#!/usr/bin/env python3
"""
Check an assistant's password against the stored hash.

Usage:
    python scripts/check_password.py --id a1

The password is prompted for unless --password is given.
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
from assistant_accounts.security.passwords import check_assistant_password
from assistant_accounts.security.sanitizer import Sanitizer


async def check_password(repo: AssistantRepository, sanitizer: Sanitizer, assistant_id, password: str) -> int:
    """Exit code: 0 on match, 1 on mismatch, 2 if the assistant is unknown."""
    safe_id = sanitizer.sanitize_string(assistant_id, "id")
    matched = await check_assistant_password(repo, safe_id, password)
    if matched is None:
        print(f"Assistant {safe_id} not found")
        return 2
    if matched:
        print("Password matches")
        return 0
    print("Password does not match")
    return 1


async def run(args) -> int:
    config = load_config()
    sanitizer = Sanitizer(max_depth=config.security.max_payload_depth)
    password = args.password or getpass.getpass("Password: ")

    repo = AssistantRepository(config.mongo)
    await repo.connect()
    try:
        return await check_password(repo, sanitizer, args.id, password)
    finally:
        await repo.disconnect()


def main():
    parser = argparse.ArgumentParser(description="Verify an assistant password")
    parser.add_argument("--id", required=True)
    parser.add_argument("--password")
    sys.exit(asyncio.run(run(parser.parse_args())))


if __name__ == "__main__":
    main()
