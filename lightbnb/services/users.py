from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from structlog import get_logger

from lightbnb.models import User
from lightbnb.schemas.user import UserCreate

logger = get_logger()


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    """Returns the user registered with `email`, or None."""
    stmt = select(User).where(User.email == email).limit(1)
    result = await db.execute(stmt)
    return result.scalar()


async def get_user_by_id(db: AsyncSession, user_id: int) -> Optional[User]:
    """Returns the user with primary key `user_id`, or None."""
    stmt = select(User).where(User.id == user_id).limit(1)
    result = await db.execute(stmt)
    return result.scalar()


async def create_user(db: AsyncSession, user: UserCreate) -> User:
    """
    Inserts a new user and returns it with its generated id.

    The password is stored as given; hashing belongs to the auth layer.
    """
    db_user = User(name=user.name, email=user.email, password=user.password)
    db.add(db_user)
    try:
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("Failed to create user", email=user.email, error=str(e))
        raise
    await db.refresh(db_user)
    logger.info("User created", user_id=db_user.id)
    return db_user
