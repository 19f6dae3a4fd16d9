class PaginationException(Exception):
    """A base exception class."""

    def __init__(self, msg):
        super().__init__(msg)


class InvalidArgument(PaginationException):
    """Raised when a configuration value is out of its domain."""

    pass


class IllegalState(PaginationException):
    """Raised when a pagination is built without one of its required values."""

    def __init__(self, what):
        super().__init__(f"The {what} has not been set.")
        self.what = what
