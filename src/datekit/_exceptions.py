class DatekitError(Exception):
    """Base class for all datekit errors."""
