from datekit._exceptions import DatekitError


class TimezoneError(DatekitError):
    """Raised when the timezone data source cannot resolve an identifier."""
