"""Test settings - in-memory database, fast hashing, console-only logging."""
from .base import *


DEBUG = False

ALLOWED_HOSTS = ["testserver", "127.0.0.1", "localhost"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

STORAGES["staticfiles"]["BACKEND"] = "django.contrib.staticfiles.storage.StaticFilesStorage"

EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"

# Files are not written from tests
LOGGING["root"]["handlers"] = ["console"]
LOGGING["root"]["level"] = "WARNING"
LOGGING["loggers"]["django"]["handlers"] = ["console"]
LOGGING["loggers"]["django.request"]["handlers"] = ["console"]
LOGGING["loggers"]["django.security"]["handlers"] = ["console"]
LOGGING["loggers"]["core"]["handlers"] = ["console"]
LOGGING["loggers"]["core"]["level"] = "WARNING"
LOGGING["loggers"]["fuellog.audit"]["handlers"] = ["console"]
LOGGING["loggers"]["fuellog.audit"]["level"] = "WARNING"
