"""Base class for domain services."""


class Service:
    """Base class for domain services.

    A domain service holds business rules that span several aggregates or
    that do not belong to a single entity.
    """

    pass
