# leadlookup/domain/errors.py
from __future__ import annotations

from .types import SearchOutcome


class LeadSearchError(Exception):
    """
    Base for every terminal outcome of one search attempt.
    `message` is the fixed operator-facing text; never raw transport output.
    """

    outcome: SearchOutcome = SearchOutcome.unknown
    message: str = "Something went wrong. Please check your setup and try again."

    def __init__(self, detail: str | None = None) -> None:
        # detail is for logs only
        super().__init__(detail or self.message)
        self.detail = detail


class MissingDateError(LeadSearchError):
    outcome = SearchOutcome.missing_date
    message = "Please select a date before searching."


class MissingAccountIdError(LeadSearchError):
    outcome = SearchOutcome.missing_account_id
    message = "Please enter an Account ID before searching."


class InvalidDateError(LeadSearchError):
    outcome = SearchOutcome.invalid_input
    message = "Please enter a valid date."


class NoResultsError(LeadSearchError):
    """Not a failure: the query worked but nothing survived filtering."""

    outcome = SearchOutcome.no_results
    message = "No leads found for the selected date and Account ID combination."


class RateLimitedError(LeadSearchError):
    outcome = SearchOutcome.rate_limited
    message = "Rate limit exceeded. Please wait a moment and try again."


class NotFoundOrMisconfiguredError(LeadSearchError):
    outcome = SearchOutcome.not_found_or_misconfigured
    message = "Invalid request. Check your table ID or field name."


class UnknownSearchError(LeadSearchError):
    outcome = SearchOutcome.unknown


class SearchInProgressError(RuntimeError):
    pass
