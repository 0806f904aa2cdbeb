"""PostgreSQL connection and session management."""

from collections.abc import Generator

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import settings

engine = create_engine(
    settings.database_url,
    pool_pre_ping=True,
    echo=settings.DEBUG,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError:
        return False


def dispose_engine() -> None:
    """Close pooled connections; called once on application shutdown."""
    engine.dispose()


def check_users_table(db: Session) -> bool:
    """True if the users table exists, i.e. the Alembic migration has been applied."""
    try:
        return inspect(db.get_bind()).has_table("users")
    except SQLAlchemyError:
        return False
