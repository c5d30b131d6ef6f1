class CoordError(Exception):
    """Base class for errors raised while translating geographic coordinates"""


class Uninitialized(CoordError):
    """A projection was used before build() created its transformer"""

    def __init__(self, projection_name: str = "projection"):
        super().__init__(f"{projection_name} used before build()")
        self.projection_name = projection_name


class ProjectionFailure(CoordError):
    """
    The projection engine could not convert a coordinate or parse a definition.

    The engine's own exception, when there is one, is kept as ``source`` and is
    also chained as ``__cause__`` by the code raising this error.
    """

    def __init__(self, message: str, source: Exception | None = None):
        super().__init__(message)
        self.source = source
