"""Redaction of API keys and tokens embedded in free text."""

import re

# Token prefixes that mark a likely credential
SENSITIVE_PREFIXES = (
    "sk-ant-",
    "sk-",
    "gsk_",
    "Bearer ",
    "ghp_",
    "xoxb-",
    "xoxp-",
    "AKIA",
    "glpat-",
    "npm_",
)

REDACTED = "[REDACTED]"

# A token runs from its prefix to whitespace, a delimiter, or end of text
SENSITIVE_TOKEN = re.compile(
    "(?:" + "|".join(re.escape(p) for p in SENSITIVE_PREFIXES) + r")[^ \t\r\n,\"'}\]]*"
)


def contains_sensitive(text: str) -> bool:
    """Check if text contains any sensitive token prefix."""
    return any(prefix in text for prefix in SENSITIVE_PREFIXES)


def scrub(text: str) -> str:
    """Replace every sensitive token with ``[REDACTED]``."""
    if not contains_sensitive(text):
        return text
    return SENSITIVE_TOKEN.sub(REDACTED, text)
