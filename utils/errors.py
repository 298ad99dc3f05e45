# errors.py


class SubmissionError(Exception):
    """Base class for failures surfaced by DocumentSubmitter.submit()."""

    code = "SUBMISSION_ERROR"

    def __init__(self, message, cause=None):
        self.message = message
        self.cause = cause
        super().__init__(message)


class CancelledWait(SubmissionError):
    """The blocking admission wait was cancelled. Gate state is unchanged."""

    code = "CANCELLED_WAIT"


class SerializationError(SubmissionError):
    """The document could not be rendered to JSON. Nothing was sent."""

    code = "SERIALIZATION_ERROR"


class TransportError(SubmissionError):
    """The HTTP request could not be sent."""

    code = "TRANSPORT_ERROR"
