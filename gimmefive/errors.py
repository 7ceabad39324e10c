class GimmeFiveError(Exception):
    """
    Base class for startup failures that end the program with a diagnostic.
    """

class CatalogError(GimmeFiveError):
    """
    The word list could not be read.
    """

class EmptyCatalogError(CatalogError):
    pass

class CatalogTooSmallError(CatalogError):
    pass

class InvariantViolation(AssertionError):
    """
    Raised when the pool or controller produces an impossible index.
    """

class TerminalError(GimmeFiveError):
    """
    The interactive screen needs a terminal on stdin.
    """
