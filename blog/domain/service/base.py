"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the blog's business rules and coordinate the
    repositories; they never touch HTTP concerns.
    """

    pass
