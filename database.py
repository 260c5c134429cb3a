from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker  # Async SQLAlchemy engine/session.
from sqlalchemy.orm import DeclarativeBase  # Base class for ORM models.
from sqlalchemy.pool import NullPool

from config import DATABASE_URL, SQL_ECHO

engine_options = {"echo": SQL_ECHO}
if DATABASE_URL.startswith("sqlite"):
    # aiosqlite connections must not be shared between event loops.
    engine_options["poolclass"] = NullPool

engine = create_async_engine(DATABASE_URL, **engine_options)  # Create async engine.

AsyncSessionLocal = async_sessionmaker(engine, expire_on_commit=False)  # Session factory.


class Base(DeclarativeBase):
    """Base class for all ORM models (collects metadata)."""
    pass


async def get_db():
    # Dependency that yields a DB session and closes it after the request.
    async with AsyncSessionLocal() as session:
        yield session
