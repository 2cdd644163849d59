"""Exception hierarchy for loandocs."""


class LoanDocsError(Exception):
    """Base exception for all loandocs errors."""


class InvalidLoanParametersError(LoanDocsError, ValueError):
    """Raised when loan terms cannot produce a meaningful schedule."""


class InvalidFundTermsError(LoanDocsError, ValueError):
    """Raised when fund terms are outside their allowed ranges."""


class TermsSheetError(LoanDocsError, ValueError):
    """Raised when an uploaded term sheet cannot be parsed."""
