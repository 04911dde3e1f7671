#!/usr/bin/env python3
"""
Issue an admin JWT for calling the assistants API.

Usage:
    python scripts/issue_token.py --user-id admin1 --role admin

Options:
    --role       Role claim (default: admin)
    --minutes    Token lifetime in minutes (default: 60)
"""

import argparse
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from assistant_accounts.config import load_config
from assistant_accounts.security.auth import create_access_token


def main():
    parser = argparse.ArgumentParser(description="Issue a signed access token")
    parser.add_argument("--user-id", required=True)
    parser.add_argument("--role", default="admin")
    parser.add_argument("--minutes", type=int, default=60)
    args = parser.parse_args()

    config = load_config()
    token = create_access_token(
        {"sub": args.user_id, "role": args.role},
        config,
        expires_minutes=args.minutes,
    )
    print(token)


if __name__ == "__main__":
    main()
