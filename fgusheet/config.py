# config.py
# application settings, overridable through environment variables

import os


def _env_flag(name, default="0"):
    return os.environ.get(name, default).lower() in ("1", "true", "yes", "on")


# Flask picks up the upper-case names below via app.config.from_object
MAX_CONTENT_LENGTH = int(os.environ.get("FGUSHEET_MAX_UPLOAD", 16 * 1024 * 1024))  # 16MB max file
UPLOAD_FOLDER = os.environ.get("FGUSHEET_UPLOAD_FOLDER", "/tmp")

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", 5000))
DEBUG = _env_flag("FGUSHEET_DEBUG")

LOG_LEVEL = os.environ.get("FGUSHEET_LOG_LEVEL", "INFO")

# used when the character has no usable name
DEFAULT_FILENAME = "character_sheet.html"
ALLOWED_EXTENSIONS = (".xml",)
