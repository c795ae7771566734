"""Default configuration for the Google Translate v2 client."""
from pathlib import Path

# Application identity
APP_NAME = "gtranslate"
APP_VERSION = "0.1.0"

# Paths
BASE_PATH = Path(__file__).resolve().parent
# Global settings file placed next to the main sources.
DEFAULT_SETTINGS_PATH = BASE_PATH / "config.yaml"

# Service endpoint
API_URI = "https://www.googleapis.com/language/translate/v2"
LANGUAGES_PATH = "/languages"
DETECT_PATH = "/detect"

# Access keys issued by the service always have this length.
ACCESS_KEY_LENGTH = 39
# Environment variable that overrides the api key from settings.
ACCESS_KEY_ENV = "GOOGLE_TRANSLATE_API_KEY"

# Two-letter code with an optional two-letter region, e.g. "en" or "zh-tw".
LANGUAGE_CODE_PATTERN = r"[a-z]{2}(-[a-z]{2})?"

# Transport defaults
DEFAULT_TIMEOUT_SEC = 20.0
DEFAULT_VERIFY_SSL = True


def get_settings_path() -> Path:
    """Return the default settings file location."""
    return DEFAULT_SETTINGS_PATH
