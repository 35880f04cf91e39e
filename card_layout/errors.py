"""Error taxonomy for card rendering.

WHY: Every failure of the pipeline is a precondition violation: missing
input, empty content, or an aspiration the surrounding service could not
find. Callers (the HTTP layer, the CLI) need typed exceptions to turn these
into a structured error payload instead of leaking raw exceptions.

HOW: CardRenderError is the common base. Each subclass carries the HTTP
status code the service layer should answer with.

RULES:
- All errors are terminal: no retry, no partial render.
- ContentLookupError also subclasses the builtin LookupError so callers
  that already catch LookupError keep working.
"""


class CardRenderError(Exception):
    """Base class for all card rendering failures."""

    status_code = 400

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MissingInputError(CardRenderError):
    """Raised when neither an aspiration id nor content was supplied."""


class EmptyContentError(CardRenderError):
    """Raised when the content is empty or whitespace-only after trimming."""


class ContentLookupError(CardRenderError, LookupError):
    """Raised when an aspiration cannot be resolved by its identifier."""

    status_code = 404
