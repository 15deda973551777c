# 📄 File: app/shared/utils/helpers.py

# 🧭 Purpose (Layman Explanation):
# Small helpful tools used all over the plant tracker, like "what time is it right now"
# in one agreed-upon timezone and making random name endings for new usernames.

# 🧪 Purpose (Technical Summary):
# General purpose utility functions: UTC clock helpers that normalise naive database
# timestamps, random string generation, and masking of
# sensitive values before they reach the logs.

# 🔗 Dependencies:
# - secrets / string: Secure random generation
# - datetime: Time helpers

# 🔄 Connected Modules / Calls From:
# Used by: domain models and services (timestamps), user provisioning (username suffixes),
# repository mappers (timezone normalisation), logging middleware (masking)

import re
import secrets
import string
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional


class HelperError(Exception):
    """Exception for helper function errors."""
    pass


# =============================================================================
# TIME HELPERS
# =============================================================================

def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Normalise a datetime to timezone-aware UTC.

    Naive values (SQLite drops tzinfo on the way back) are taken to be UTC.

    Args:
        value: Datetime to normalise, or None

    Returns:
        Aware UTC datetime, or None when value is None
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def add_days(value: datetime, days: int) -> datetime:
    return value + timedelta(days=days)


# =============================================================================
# RANDOM GENERATION
# =============================================================================

def generate_random_string(
    length: int = 10,
    include_digits: bool = True,
    include_uppercase: bool = True,
    include_lowercase: bool = True,
    custom_chars: str = None
) -> str:
    """
    Generate random string with specified character sets.

    Args:
        length: String length
        include_digits: Include digits (0-9)
        include_uppercase: Include uppercase letters (A-Z)
        include_lowercase: Include lowercase letters (a-z)
        custom_chars: Custom character set

    Returns:
        Random string
    """
    if custom_chars:
        chars = custom_chars
    else:
        chars = ""
        if include_lowercase:
            chars += string.ascii_lowercase
        if include_uppercase:
            chars += string.ascii_uppercase
        if include_digits:
            chars += string.digits

    if not chars:
        raise HelperError("No character set specified for random string generation")

    return ''.join(secrets.choice(chars) for _ in range(length))


# =============================================================================
# MASKING
# =============================================================================

def mask_value(value: str, visible: int = 4, mask_char: str = '*') -> str:
    """Mask all but the last few characters of a secret value."""
    if not value:
        return value
    if len(value) <= visible:
        return mask_char * len(value)
    return mask_char * (len(value) - visible) + value[-visible:]


def mask_sensitive_data(
    text: str,
    patterns: Dict[str, str] = None,
    mask_char: str = '*'
) -> str:
    """
    Mask sensitive data in text.

    Args:
        text: Text to mask
        patterns: Dict of pattern_name -> regex_pattern
        mask_char: Character to use for masking

    Returns:
        Text with sensitive data masked
    """
    if not text:
        return text

    default_patterns = {
        'email': r'[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}',
        'bearer': r'Bearer\s+[A-Za-z0-9\-._~+/]+=*',
    }

    patterns = patterns or default_patterns
    masked_text = text

    for pattern_name, pattern in patterns.items():
        def mask_match(match, pattern_name=pattern_name):
            matched_text = match.group(0)
            if pattern_name == 'email':
                username, _, domain = matched_text.partition('@')
                return f"{username[0]}{mask_char * (len(username) - 1)}@{domain}"
            if pattern_name == 'bearer':
                return f"Bearer {mask_char * 8}"
            return mask_value(matched_text, mask_char=mask_char)

        masked_text = re.sub(pattern, mask_match, masked_text)

    return masked_text
