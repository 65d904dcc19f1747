# Exception taxonomy for move verification
class VerificationError(Exception):
    """Base exception for proposals that cannot be accepted."""

    pass


class Rejection(VerificationError):
    """Raised when a proposal is not the unique legal consequence of its action."""

    pass


class StateFormatError(VerificationError, ValueError):
    """Raised when a wire state or operation cannot be decoded."""

    pass


class LocationFormatError(StateFormatError):
    """Raised when a location string is not a zone letter plus a 2-digit index."""

    pass
