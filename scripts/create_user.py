"""Utility script to register a user profile used for conversation display."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from jobboard.domain.entities import User
from jobboard.domain.errors import MessagingError
from jobboard.infrastructure.database import SessionLocal, initialize_database
from jobboard.infrastructure.repositories import UserRepository


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for profile creation."""

    parser = argparse.ArgumentParser(
        description="Create a user profile for the job board messaging service.",
    )
    parser.add_argument("--email", required=True, help="Correo electrónico del usuario")
    parser.add_argument(
        "--name",
        default=None,
        help="Nombre visible en la lista de conversaciones (opcional)",
    )
    parser.add_argument(
        "--role",
        choices=("user", "admin"),
        default="user",
        help="Rol del usuario (por defecto: user)",
    )
    parser.add_argument("--avatar-url", default=None, help="URL del avatar (opcional)")
    return parser.parse_args()


def main() -> None:
    """Create a profile using the provided command line arguments."""

    args = parse_args()
    initialize_database()

    session = SessionLocal()
    try:
        repository = UserRepository(session)
        if repository.get_by_email(args.email) is not None:
            raise SystemExit("El correo electrónico ya está registrado")
        user = repository.create(
            User(
                id=None,
                email=args.email,
                role=args.role,
                full_name=args.name,
                avatar_url=args.avatar_url,
            )
        )
    except (MessagingError, SQLAlchemyError) as exc:
        session.rollback()
        raise SystemExit(f"No se pudo guardar el perfil: {exc}") from exc
    else:
        print(f"Perfil {user.id} listo: {user.email} ({user.role}) nombre={user.full_name or '-'}")
    finally:
        session.close()


if __name__ == "__main__":
    main()
