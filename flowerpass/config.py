"""
Configuration constants for the Flower Password application.
"""

# Application Metadata
APP_VERSION = "1.0"  # Use: Current version of the application. Type: str. Range: Semantic versioning string (e.g., "1.0.0")
APP_NAME = "Flower Password"  # Use: Full name of the application. Type: str. Range: Any valid string.
APP_TITLE_PREFIX = f"{APP_NAME} v{APP_VERSION}"  # Use: Prefix for the application window titles, combining name and version. Type: str (f-string). Range: Derived from APP_NAME and APP_VERSION.

# Derivation Settings
DIGEST_HEX_LENGTH = 32  # Use: Length in hex characters of the HMAC-MD5 digest. Type: int. Range: 32 (128 bits).
MODE_FLOWER = "flower"  # Use: Persisted value of the raw hex digest encoding mode. Type: str. Range: "flower".
MODE_BASE64 = "base64"  # Use: Persisted value of the compact base64 encoding mode. Type: str. Range: "base64".
DEFAULT_MODE = MODE_FLOWER  # Use: Encoding mode used when none has been saved. Type: str. Range: MODE_FLOWER or MODE_BASE64.
DEFAULT_LENGTH = 16  # Use: Default length of the derived password. Type: int. Range: One of LENGTH_OPTIONS.
LENGTH_OPTIONS = list(range(6, 33))  # Use: Password lengths offered in the length selector. Type: list[int]. Range: 6 to DIGEST_HEX_LENGTH.

# UI Settings
COUNTDOWN_SECONDS = 5  # Use: Seconds before the clipboard is cleared after Copy or Fill. Type: int. Range: Positive integer.
COUNTDOWN_TICK_MS = 1000  # Use: Interval of the countdown timer in milliseconds. Type: int. Range: 1000.
COPY_BUTTON_TEXT = "Copy"  # Use: Idle label of the copy button. Type: str. Range: Any string.
COPY_BUTTON_COUNTDOWN_TEXT = "Copied! ({seconds}s)"  # Use: Copy button label during the countdown. Type: str (format string). Range: Must contain {seconds}.
FILL_BUTTON_TEXT = "Fill"  # Use: Idle label of the fill button. Type: str. Range: Any string.
FILL_BUTTON_COUNTDOWN_TEXT = "Filled ({seconds}s)"  # Use: Fill button label during the countdown. Type: str (format string). Range: Must contain {seconds}.
RESULT_ERROR_HASH_UNAVAILABLE = "Error: hash library not loaded"  # Use: Diagnostic shown when the keyed hash cannot be used. Type: str. Range: Any string.
RESULT_ERROR_ENCODING = "Error: invalid digest"  # Use: Diagnostic shown when the digest cannot be encoded. Type: str. Range: Any string.
RESULT_FONT_FAMILY = "Consolas"  # Use: Monospace font for the derived password. Type: str. Range: Any installed font family.
RESULT_FONT_SIZE = 14  # Use: Point size of the derived password font. Type: int. Range: Positive integer.
APP_STYLE = 'Fusion'  # Use: PyQt5 application style. Type: str. Range: Valid PyQt5 style names (e.g., 'Fusion', 'Windows', 'Macintosh').

# Autofill Settings
PASSWORD_FIELD_HINTS = ["pass", "pwd"]  # Use: Substrings of an input's name or id that mark it as a password field. Type: list[str]. Range: Lowercase strings.
TEXT_INPUT_TYPES = ["text", ""]  # Use: Input types searched by the name/id fallback ("" means no type attribute). Type: list[str]. Range: Lowercase input types.
FILL_EVENTS = ["input", "change", "blur"]  # Use: Notifications dispatched on a filled field, in order. Type: list[str]. Range: DOM event names.

# File and Directory Names
CONFIG_DIR_NAME = ".flowerpass"  # Use: Name of the hidden directory within the user's home directory where settings are stored. Type: str. Range: Any valid directory name.
SETTINGS_FILE = "settings.json"  # Use: Filename of the persisted popup settings. Type: str. Range: Any valid filename.
