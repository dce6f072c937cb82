"""Credential validation errors."""

from flowguard.credentials.types import CredentialIssue


class CredentialError(ValueError):
    """Base class for a credential that fails a strength rule."""

    issue: CredentialIssue
    message: str = "Credential rejected"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class CredentialTooShort(CredentialError):
    issue = CredentialIssue.TOO_SHORT
    message = "Credential is shorter than the minimum length"


class CredentialTooLong(CredentialError):
    issue = CredentialIssue.TOO_LONG
    message = "Credential is longer than the maximum length"


class NoUppercase(CredentialError):
    issue = CredentialIssue.NO_UPPERCASE
    message = "Credential must contain an uppercase letter"


class NoLowercase(CredentialError):
    issue = CredentialIssue.NO_LOWERCASE
    message = "Credential must contain a lowercase letter"


class NoDigit(CredentialError):
    issue = CredentialIssue.NO_DIGIT
    message = "Credential must contain a digit"


class WeakCredential(CredentialError):
    issue = CredentialIssue.WEAK
    message = "Credential must contain a special character"


class CommonPassword(CredentialError):
    issue = CredentialIssue.COMMON_PASSWORD
    message = "Credential is a commonly used password"


# Lookup used to raise the error for a given rule
ERRORS_BY_ISSUE: dict[CredentialIssue, type[CredentialError]] = {
    cls.issue: cls
    for cls in (
        CredentialTooShort,
        CredentialTooLong,
        NoUppercase,
        NoLowercase,
        NoDigit,
        WeakCredential,
        CommonPassword,
    )
}
