"""Credential strength, masking, API key and lifecycle checks."""

from flowguard.credentials.types import (
    ApiKeyProvider,
    CredentialIssue,
    CredentialRequirements,
    DEFAULT_REQUIREMENTS,
)
from flowguard.credentials.errors import (
    CredentialError,
    CredentialTooShort,
    CredentialTooLong,
    NoUppercase,
    NoLowercase,
    NoDigit,
    WeakCredential,
    CommonPassword,
)
from flowguard.credentials.strength import (
    COMMON_PASSWORDS,
    constant_time_equal,
    is_common_password,
    validate_credential_strength,
    mask_credential,
)
from flowguard.credentials.api_keys import (
    detect_api_key_provider,
    validate_api_key_format,
)
from flowguard.credentials.entropy import (
    estimate_entropy,
    has_minimum_entropy,
)
from flowguard.credentials.lifecycle import (
    is_secure_file_mode,
    is_expired,
    days_until_expiry,
)
from flowguard.credentials.scrub import (
    SENSITIVE_PREFIXES,
    contains_sensitive,
    scrub,
)

__all__ = [
    "ApiKeyProvider",
    "CredentialIssue",
    "CredentialRequirements",
    "DEFAULT_REQUIREMENTS",
    "CredentialError",
    "CredentialTooShort",
    "CredentialTooLong",
    "NoUppercase",
    "NoLowercase",
    "NoDigit",
    "WeakCredential",
    "CommonPassword",
    "COMMON_PASSWORDS",
    "constant_time_equal",
    "is_common_password",
    "validate_credential_strength",
    "mask_credential",
    "detect_api_key_provider",
    "validate_api_key_format",
    "estimate_entropy",
    "has_minimum_entropy",
    "is_secure_file_mode",
    "is_expired",
    "days_until_expiry",
    "SENSITIVE_PREFIXES",
    "contains_sensitive",
    "scrub",
]
