"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the session and login logic that spans several
    records or talks to several collaborators.
    """

    pass
