"""
Conversions settings
"""

from pathlib import Path
import environ, os

LOG_LEVEL = os.getenv("DJANGO_LOG_LEVEL", "INFO")

BASE_DIR = Path(__file__).resolve().parent.parent
env = environ.Env(
    DEBUG=(bool, False),
)
# loads .env from the project root when running locally
env_file = BASE_DIR / ".env"
if env_file.exists():
    environ.Env.read_env(env_file)

SECRET_KEY = env("DJANGO_SECRET_KEY", default="dev-insecure")
DEBUG = env.bool("DEBUG", default=False)
USE_TZ = True

INSTALLED_APPS = [
    "conversions",
]

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,

    # ---------------- Handlers ----------------
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
            "stream": "ext://sys.stdout",
        },
    },

    # --------------- Formatters ---------------
    "formatters": {
        "verbose": {
            "format": "{asctime} [{levelname}] {name}: {message}",
            "style": "{",
        },
    },

    # --------------- Root logger --------------
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },

    "loggers": {
        "conversions": {
            "handlers": ["console"],
            "level": env("CONVERSIONS_LOG_LEVEL", default=LOG_LEVEL),
            "propagate": False,
        },
    },
}

# Conversion destinations (empty disables)
FACEBOOK_PIXEL_ID = env("FACEBOOK_PIXEL_ID", default="")
FACEBOOK_TEST_EVENT_CODE = env("FACEBOOK_TEST_EVENT_CODE", default="")
FACEBOOK_CAPI_TEST_MODE = env.bool("FACEBOOK_CAPI_TEST_MODE", default=False)
# "preserve" forwards madid as supplied; "by_os" upper-cases IDFAs and lower-cases AAIDs
FACEBOOK_DEVICE_ID_CASING = env("FACEBOOK_DEVICE_ID_CASING", default="preserve")

REDDIT_AD_ACCOUNT_ID = env("REDDIT_AD_ACCOUNT_ID", default="")
REDDIT_CAPI_TEST_MODE = env.bool("REDDIT_CAPI_TEST_MODE", default=False)
REDDIT_PARTNER = env("REDDIT_PARTNER", default="")
REDDIT_DEVICE_ID_CASING = env("REDDIT_DEVICE_ID_CASING", default="by_os")
