"""Exception list validation exceptions."""

from stylecheck.domain.exceptions.base import StyleCheckError


class MalformedExceptionRecordError(StyleCheckError):
    """Record in the exception list fails shape validation.

    Raised at load time. A corrupt exception list would silently
    mask real violations, so loading aborts.

    Attributes:
        source: Name of the exception list (file path or "<string>")
        line_no: 1-based line of the bad record in the list
        reason: What is wrong with the record
    """

    def __init__(self, source: str, line_no: int, reason: str) -> None:
        # FAIL-FIRST validation
        if not source:
            raise ValueError("source must not be empty")
        if line_no <= 0:
            raise ValueError(f"line_no must be > 0, got {line_no}")
        if not reason:
            raise ValueError("reason must not be empty")

        self.source = source
        self.line_no = line_no
        self.reason = reason
        super().__init__(f"{source}:{line_no}: malformed exception record: {reason}")
