from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from structlog import get_logger

from lightbnb.models import Property
from lightbnb.schemas.property import PropertyCreate
from lightbnb.utils.money import to_minor_units

logger = get_logger()


async def create_property(db: AsyncSession, property: PropertyCreate) -> Property:
    """
    Inserts a new listing and returns it with its generated id.

    `cost_per_night` arrives in dollars and is stored in cents.
    """
    data = property.model_dump()
    data["cost_per_night"] = to_minor_units(property.cost_per_night)
    listing = Property(**data)
    db.add(listing)
    try:
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("Failed to create property", owner_id=property.owner_id, title=property.title, error=str(e))
        raise
    await db.refresh(listing)
    logger.info("Property created", property_id=listing.id, owner_id=listing.owner_id)
    return listing
