"""
Shared helpers for Supabase queries.

Every repository runs its PostgREST calls through execute() so failures reach
the application layer as RepositoryError, and timeouts as FetchTimeoutError.
Rows are validated into domain models with parse_rows().
"""
import logging
from typing import Any, Dict, Iterable, List, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from application.exceptions import FetchTimeoutError, RepositoryError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def execute(query: Any, action: str) -> List[Dict[str, Any]]:
    """
    Execute a PostgREST query builder.

    Args:
        query: Query builder (anything with .execute())
        action: Short description for logs and error messages

    Returns:
        Result rows (empty list when the response carries no data)

    Raises:
        FetchTimeoutError: If the request exceeded the client timeout
        RepositoryError: If the request failed for any other reason
    """
    try:
        result = query.execute()
    except httpx.TimeoutException as e:
        logger.warning(f"Timed out {action}: {e}")
        raise FetchTimeoutError(f"Timed out {action}") from e
    except Exception as e:
        logger.exception(f"Error {action}: {e}")
        raise RepositoryError(f"Error {action}: {e}") from e

    data = getattr(result, "data", None)
    if data is None:
        return []
    if isinstance(data, dict):
        return [data]
    return list(data)


def parse_rows(model: Type[ModelT], rows: Iterable[Dict[str, Any]], table: str) -> List[ModelT]:
    """
    Validate rows into a model, dropping rows that fail validation.

    Args:
        model: Pydantic model to validate into
        rows: Raw rows
        table: Source table name (for logging)

    Returns:
        Validated models, input order preserved
    """
    parsed: List[ModelT] = []
    for row in rows:
        try:
            parsed.append(model.model_validate(row))
        except ValidationError as e:
            logger.warning(f"Skipping invalid {table} row {row.get('id', '?')}: {e}")
    return parsed
