class NullArgumentError(TypeError):
    """
    Raised when None is passed where a value is required.
    """


class NoSuchElementError(LookupError):
    """
    Raised when unwrapping an empty Option.
    """
