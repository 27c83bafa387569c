import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from sqlalchemy.ext.asyncio import AsyncSession
from structlog import get_logger

from lightbnb.config import settings
from lightbnb.schemas.property_search import FilterCriteria
from lightbnb.utils.limits import check_limit
from lightbnb.utils.money import to_minor_units

logger = get_logger()

DEFAULT_LIMIT = 10

BASE_PROPERTY_QUERY = """SELECT properties.*, AVG(rating) AS average_rating
FROM properties
LEFT JOIN property_reviews ON properties.id = property_reviews.property_id"""

_LIKE_SPECIALS = re.compile(r"([\\%_])")

Criteria = Union[FilterCriteria, Mapping[str, Any], None]


@dataclass(frozen=True)
class QueryPlan:
    """SQL text with `$n` placeholders and the values bound to them, in order."""
    text: str
    params: Tuple[Any, ...]


class _ClauseBuilder:
    """
    Collects filter fragments and their values.

    Placeholder numbers come from the length of the parameter list at the
    moment a value is bound, so the n-th `$n` always refers to the n-th value.
    Row filters go before GROUP BY, aggregate filters after it.
    """

    def __init__(self) -> None:
        self.params: List[Any] = []
        self.where: List[str] = []
        self.having: List[str] = []

    def bind(self, value: Any) -> str:
        self.params.append(value)
        return f"${len(self.params)}"

    def add_where(self, condition: str, value: Any) -> None:
        keyword = "WHERE" if not self.where else "AND"
        self.where.append(f"{keyword} {condition.format(self.bind(value))}")

    def add_having(self, condition: str, value: Any) -> None:
        keyword = "HAVING" if not self.having else "AND"
        self.having.append(f"{keyword} {condition.format(self.bind(value))}")


def _city_pattern(city: str) -> str:
    escaped = _LIKE_SPECIALS.sub(r"\\\1", city)
    return f"%{escaped}%"


def _coerce_criteria(criteria: Criteria) -> FilterCriteria:
    if criteria is None:
        return FilterCriteria()
    if isinstance(criteria, FilterCriteria):
        return criteria
    # Raises pydantic.ValidationError (a ValueError) on malformed input
    return FilterCriteria.model_validate(dict(criteria))


def build_property_search_query(criteria: Criteria = None, limit: int = DEFAULT_LIMIT) -> QueryPlan:
    """
    Builds the property listing query for the given filters.

    Clauses are emitted in a fixed order: city, minimum price, maximum price,
    owner, rating. The limit is always the last parameter.

    Raises:
        ValueError: if a filter value or the limit is invalid. Nothing is
            built from unvalidated input.
    """
    criteria = _coerce_criteria(criteria)
    limit = check_limit(limit)
    clauses = _ClauseBuilder()

    if criteria.city:
        clauses.add_where("city ILIKE {}", _city_pattern(criteria.city))
    if criteria.minimum_price_per_night is not None:
        clauses.add_where("cost_per_night >= {}", to_minor_units(criteria.minimum_price_per_night))
    if criteria.maximum_price_per_night is not None:
        clauses.add_where("cost_per_night <= {}", to_minor_units(criteria.maximum_price_per_night))
    if criteria.owner_id is not None:
        clauses.add_where("owner_id = {}", criteria.owner_id)
    if criteria.minimum_rating is not None:
        clauses.add_having("AVG(rating) >= {}", criteria.minimum_rating)

    # No ORDER BY: which rows LIMIT keeps is up to the planner
    lines = [BASE_PROPERTY_QUERY, *clauses.where, "GROUP BY properties.id", *clauses.having]
    lines.append(f"LIMIT {clauses.bind(limit)};")
    return QueryPlan(text="\n".join(lines), params=tuple(clauses.params))


async def execute_query_plan(db: AsyncSession, plan: QueryPlan) -> List[Dict]:
    """
    Executes a QueryPlan and returns the rows as dictionaries.

    The text goes to the driver untouched; asyncpg understands `$n` markers.
    """
    try:
        conn = await db.connection()
        result = await conn.exec_driver_sql(plan.text, plan.params)
        return [dict(row) for row in result.mappings().all()]
    except Exception as e:
        logger.error("Failed to execute property query", sql_query=plan.text, error=str(e))
        raise


async def list_properties(db: AsyncSession, criteria: Criteria = None, limit: Optional[int] = None) -> List[Dict]:
    """Lists properties with their average rating, filtered by `criteria`."""
    criteria = _coerce_criteria(criteria)
    plan = build_property_search_query(criteria, settings.DEFAULT_RESULT_LIMIT if limit is None else limit)
    rows = await execute_query_plan(db, plan)
    logger.info(
        "Property search executed",
        filters=criteria.model_dump(exclude_none=True, mode="json"),
        unfiltered=criteria.is_empty(),
        limit=plan.params[-1],
        result_count=len(rows),
    )
    return rows
