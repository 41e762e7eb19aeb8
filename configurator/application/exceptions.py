
class InvalidInputError(ValueError):
    """Raised when a service, year or action value is outside its enumeration."""
    pass
