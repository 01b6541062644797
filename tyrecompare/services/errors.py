# tyrecompare/services/errors.py

"""Exception types raised by offer sources and the search orchestrator."""


class SearchError(Exception):
    """Base class for every error a search can surface to the user."""


class InvalidSelectionError(SearchError):
    """A search was requested with no vendor selected."""


class SearchInFlightError(SearchError):
    """A search was requested while another one is still running."""


class OfferSourceError(SearchError):
    """An offer source failed to produce a usable list of offers."""


class TransportError(OfferSourceError):
    """The Offer Search Service was unreachable or answered non-200."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(OfferSourceError):
    """A response payload could not be turned into offers."""
