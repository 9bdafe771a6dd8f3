# ============================================================================
# Database Connection
# ============================================================================
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
import logging

from prepflow.config import get_settings

settings = get_settings()
logger = logging.getLogger(__name__)

# Define Base FIRST (very important)
class Base(DeclarativeBase):
    pass

def to_async_url(url: str) -> str:
    """Rewrite a plain database URL to use its async driver"""
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("sqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return url

database_url = to_async_url(settings.DATABASE_URL)

logger.info(f"Connecting to database: {database_url.split('@')[1] if '@' in database_url else database_url}")

# SQLite uses its own pool, sizing only applies to server databases
engine_options = {"echo": settings.DEBUG}
if not database_url.startswith("sqlite"):
    engine_options.update(pool_size=5, max_overflow=10, pool_pre_ping=True)

engine = create_async_engine(database_url, **engine_options)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False
)

async def get_db():
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
