"""
Pure validation predicates for user fields.
"""
from typing import Any

# Hangul code point blocks: Jamo, Compatibility Jamo, Jamo Extended-A,
# Syllables, Jamo Extended-B, Halfwidth Jamo
HANGUL_RANGES = (
    (0x1100, 0x11FF),
    (0x3130, 0x318F),
    (0xA960, 0xA97F),
    (0xAC00, 0xD7A3),
    (0xD7B0, 0xD7FF),
    (0xFFA0, 0xFFDC),
)


def is_hangul_char(char: str) -> bool:
    """Check if a single character is a Hangul syllable or Jamo."""
    code = ord(char)
    return any(start <= code <= end for start, end in HANGUL_RANGES)


def contains_hangul(text: str) -> bool:
    """Check if the text contains any Hangul (Korean script) character."""
    return any(is_hangul_char(char) for char in text)


def is_valid_email(value: Any) -> bool:
    """
    Check the email shape.

    Only the presence of ``@`` is required; no further format checks.
    """
    return isinstance(value, str) and "@" in value


def is_valid_field_name(key: str) -> bool:
    """
    Check that an update key names a plain top-level field.

    Rejects empty keys, operators (``$``-prefixed), dotted paths and NUL bytes.
    """
    return bool(key) and not key.startswith("$") and "." not in key and "\0" not in key
