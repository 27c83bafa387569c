from typing import Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from structlog import get_logger

from lightbnb.config import settings
from lightbnb.models import Property, PropertyReview, Reservation
from lightbnb.utils.limits import check_limit

logger = get_logger()


def reservations_for_guest_query(guest_id: int, limit: int):
    """Reservations of one guest with the reserved property and its average rating."""
    return (
        select(
            *Property.__table__.columns,
            Reservation.id.label("reservation_id"),
            Reservation.start_date,
            Reservation.end_date,
            func.avg(PropertyReview.rating).label("average_rating"),
        )
        .select_from(Reservation)
        .join(Property, Property.id == Reservation.property_id)
        .outerjoin(PropertyReview, PropertyReview.property_id == Property.id)
        .where(Reservation.guest_id == guest_id)
        .group_by(Property.id, Reservation.id)
        .order_by(Reservation.start_date)
        .limit(limit)
    )


async def list_reservations_for_guest(db: AsyncSession, guest_id: int, limit: Optional[int] = None) -> List[Dict]:
    limit = check_limit(settings.DEFAULT_RESULT_LIMIT if limit is None else limit)
    try:
        result = await db.execute(reservations_for_guest_query(guest_id, limit))
        rows = [dict(row) for row in result.mappings().all()]
    except Exception as e:
        logger.error("Failed to list reservations", guest_id=guest_id, error=str(e))
        raise
    logger.info("Reservations listed", guest_id=guest_id, result_count=len(rows))
    return rows
