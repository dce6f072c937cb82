"""API key provider detection and format validation."""

from flowguard.credentials.strength import _as_bytes
from flowguard.credentials.types import ApiKeyProvider

# Order matters: "sk-ant-" must be tested before "sk-"
_PROVIDER_PREFIXES: tuple[tuple[bytes, ApiKeyProvider], ...] = (
    (b"sk-ant-", ApiKeyProvider.ANTHROPIC),
    (b"sk-", ApiKeyProvider.OPENAI),
    (b"AIza", ApiKeyProvider.GOOGLE),
    (b"ghp_", ApiKeyProvider.GITHUB),
    (b"xoxb-", ApiKeyProvider.SLACK_BOT),
    (b"xapp-", ApiKeyProvider.SLACK_APP),
    (b"BSA", ApiKeyProvider.BRAVE),
)

MIN_API_KEY_LENGTH = 10

_WHITESPACE = frozenset(b" \t\r\n")


def detect_api_key_provider(key: str | bytes) -> ApiKeyProvider:
    """Classify a key by its literal prefix."""
    data = _as_bytes(key)
    for prefix, provider in _PROVIDER_PREFIXES:
        if data.startswith(prefix):
            return provider
    return ApiKeyProvider.UNKNOWN


def validate_api_key_format(key: str | bytes) -> bool:
    """Check a key is at least 10 bytes of printable ASCII with no whitespace."""
    data = _as_bytes(key)
    if len(data) < MIN_API_KEY_LENGTH:
        return False
    for c in data:
        if c < 0x20 or c > 0x7E:
            return False
        if c in _WHITESPACE:
            return False
    return True
