"""Print a bearer token asserting the given identity."""
from __future__ import annotations

import argparse
from datetime import timedelta

from ballot_registry.api.routes.auth import create_access_token


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("identity")
    parser.add_argument("--minutes", type=int, default=None, help="token lifetime in minutes")
    args = parser.parse_args(argv)

    expires = timedelta(minutes=args.minutes) if args.minutes is not None else None
    print(create_access_token(args.identity, expires_delta=expires))


if __name__ == "__main__":
    main()
