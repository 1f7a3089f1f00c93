#!/usr/bin/env python3
"""
Issue a bearer token for a caller principal.

The token is signed with ``SECRET_KEY`` (see
``quote_keeper_api.app.core.config``); the server must run with the
same key to accept it.

Usage:
    python create_token.py alice --days 30
"""

import argparse

from quote_keeper_api.app.core.security import create_access_token


def main():
    ap = argparse.ArgumentParser(description="Create a Quote Keeper access token.")
    ap.add_argument("principal", help="Caller identity to embed as the token subject")
    ap.add_argument("--days", type=int, default=365, help="Token lifetime in days (default 365)")
    args = ap.parse_args()

    print(create_access_token({"sub": args.principal}, expires_delta=args.days * 24 * 60 * 60))


if __name__ == "__main__":
    main()
