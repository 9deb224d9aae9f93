"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
Absent data is never an error: repositories return empty lists or None and
use cases return empty results.
"""


class RepositoryError(Exception):
    """A read or write against the persistence layer failed.

    Raised by infrastructure repositories when the database call itself
    fails. Use cases let it propagate; routers map it to a 502.
    """

    pass


class FetchTimeoutError(RepositoryError):
    """A fetch exceeded the configured timeout.

    Use cases treat this as "no data available" for the item being fetched
    and skip it instead of failing the whole computation.
    """

    pass


class ProgramNotFoundError(Exception):
    """The requested training program slug does not exist."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f'Program "{slug}" not found')


class ProgramGenerationError(Exception):
    """A plan could not be generated from the program's templates.

    Raised when the program has no workout templates or no catalog exercise
    is compatible with the user's equipment.
    """

    pass
