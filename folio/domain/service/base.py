"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the content pipeline logic: querying the store,
    mapping records and assembling block trees.
    """

    pass
