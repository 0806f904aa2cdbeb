"""
Create a user from the command line. Run from project root:
  python -m app.scripts.create_user USERNAME EMAIL PASSWORD
Example:
  python -m app.scripts.create_user alice alice@example.com secret1
"""
import argparse
import sys

from pydantic import ValidationError

from app.core.database import SessionLocal
from app.core.logging import configure_logging
from app.schemas.user import UserCreate
from app.services.errors import UserServiceError
from app.services.users import UserService


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a user without going through the HTTP API.")
    parser.add_argument("username", help="Username (1-255 chars, unique)")
    parser.add_argument("email", help="Email address")
    parser.add_argument("password", help="Password (1-255 chars, stored as supplied)")
    args = parser.parse_args(argv)

    configure_logging()

    try:
        data = UserCreate(username=args.username, email=args.email, password=args.password)
    except ValidationError as e:
        for err in e.errors():
            field = ".".join(str(p) for p in err["loc"])
            print(f"Invalid {field}: {err['msg']}", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        user = UserService(db).create(data)
    except UserServiceError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()

    print(f"Created user '{user.username}' with id {user.id}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
