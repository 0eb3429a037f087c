"""
Structured error codes for word-cloud runs.
Use these keys in return values and logs; map to user-facing messages in the UI.
"""

EMPTY_WORDS = "empty_words"
SURFACE_UNAVAILABLE = "surface_unavailable"
INPUT_INVALID = "input_invalid"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    EMPTY_WORDS: "No words to show. Add comments with words longer than three letters.",
    SURFACE_UNAVAILABLE: "Drawing surface is not available; nothing was drawn.",
    INPUT_INVALID: "Input file could not be read. Expected JSON, CSV, or plain text.",
}


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given error key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)
