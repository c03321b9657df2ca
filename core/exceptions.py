"""Error types shared by the Casebinder core components."""


class CasebinderError(Exception):
    """Base exception for all Casebinder errors."""


class NotFoundError(CasebinderError):
    """Raised when a case, document, folder or upload id is not registered."""


class InvalidArgumentError(CasebinderError):
    """Raised for unknown templates, invalid status values or unsupported formats."""


class AnalysisError(CasebinderError):
    """Raised when any step of a document analysis fails.

    The originating exception is kept on ``cause`` so callers can inspect it
    without parsing the message.
    """

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Analysis failed: {cause}")
        self.cause = cause
