"""Mint a bearer token for local testing against the messaging API."""

from __future__ import annotations

import argparse
from datetime import timedelta

from jobboard.infrastructure.security import create_access_token


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Issue a signed token with the claims expected by the API.",
    )
    parser.add_argument("--id", required=True, help="Identificador del usuario")
    parser.add_argument("--role", choices=("user", "admin"), default="user")
    parser.add_argument("--email", default=None, help="Correo a incluir en el token")
    parser.add_argument(
        "--minutes",
        type=int,
        default=None,
        help="Minutos de validez (por defecto: ACCESS_TOKEN_EXPIRE_MINUTES)",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    claims = {"id": args.id, "role": args.role}
    if args.email:
        claims["email"] = args.email
    expires = timedelta(minutes=args.minutes) if args.minutes else None
    print(create_access_token(claims, expires_delta=expires))


if __name__ == "__main__":
    main()
