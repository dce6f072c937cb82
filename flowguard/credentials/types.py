"""Type definitions for credential checks."""

from dataclasses import dataclass
from enum import Enum


class ApiKeyProvider(str, Enum):
    """Provider inferred from an API key's literal prefix."""
    ANTHROPIC = "anthropic"
    OPENAI = "openai"
    GOOGLE = "google"
    GITHUB = "github"
    SLACK_BOT = "slack_bot"
    SLACK_APP = "slack_app"
    BRAVE = "brave"
    UNKNOWN = "unknown"


class CredentialIssue(str, Enum):
    """Strength rules, in the order they are checked."""
    TOO_SHORT = "credential_too_short"
    TOO_LONG = "credential_too_long"
    NO_UPPERCASE = "no_uppercase"
    NO_LOWERCASE = "no_lowercase"
    NO_DIGIT = "no_digit"
    WEAK = "weak_credential"            # Missing required special character
    COMMON_PASSWORD = "common_password"


@dataclass(frozen=True)
class CredentialRequirements:
    """Strength policy for a credential.

    min_length <= max_length is not cross-checked.
    """
    min_length: int = 16
    max_length: int = 256
    require_uppercase: bool = True
    require_lowercase: bool = True
    require_digit: bool = True
    require_special: bool = False
    reject_common: bool = True


DEFAULT_REQUIREMENTS = CredentialRequirements()
