class InvalidQueryError(ValueError):
    """A reading query that cannot be answered as asked."""


class InvalidDeviceIdError(ValueError):
    pass


class MissingSensorDataError(ValueError):
    pass
