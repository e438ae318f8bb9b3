from datekit._exceptions import DatekitError


class CalendarError(DatekitError):
    """Raised when a calendar query is used without the collaborator it needs."""
