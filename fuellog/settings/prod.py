"""Production settings for the refueling journal.

Requires DATABASE_URL, ALLOWED_HOSTS and admin e-mails in the environment;
fails at import time if any of them is missing.
"""
import dj_database_url
from .base import *
from .logging_conf import LOG_DIR

DEBUG = False

# Hosts - no localhost fallback in production
ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=[], delimiter=",")
if not ALLOWED_HOSTS:
    raise RuntimeError("ALLOWED_HOSTS must be set in production")

# HTML-формы журнала отправляются с того же домена через прокси
CSRF_TRUSTED_ORIGINS = env.list("CSRF_TRUSTED_ORIGINS", default=[], delimiter=",")

# Database
DATABASE_URL = env.str("DATABASE_URL", None)

if not DATABASE_URL:
    raise RuntimeError("DATABASE_URL must be set in production")

DATABASES = {
    "default": dj_database_url.parse(
        DATABASE_URL,
        engine="django.db.backends.postgresql",
        conn_max_age=env.int("DB_CONN_MAX_AGE", 600),
        conn_health_checks=True,
        ssl_require=env.bool("DB_SSL_REQUIRE", False),
    )
}

# Security hardening
SECURE_SSL_REDIRECT = env.bool("SECURE_SSL_REDIRECT", True)
SESSION_COOKIE_SECURE = env.bool("SESSION_COOKIE_SECURE", True)
CSRF_COOKIE_SECURE = env.bool("CSRF_COOKIE_SECURE", True)
SECURE_HSTS_SECONDS = env.int("SECURE_HSTS_SECONDS", 31536000)
SECURE_HSTS_INCLUDE_SUBDOMAINS = env.bool("SECURE_HSTS_INCLUDE_SUBDOMAINS", True)
SECURE_HSTS_PRELOAD = env.bool("SECURE_HSTS_PRELOAD", True)

# Running behind a proxy/load balancer; get_client_ip trusts X-Forwarded-For only here
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
USE_X_FORWARDED_HOST = True
USE_X_FORWARDED_PORT = True

EMAIL_BACKEND = env.str("EMAIL_BACKEND", "django.core.mail.backends.smtp.EmailBackend")

# Logging: files only, audit trail in its own file
LOGGING["handlers"]["file_general"]["maxBytes"] = 100 * 1024 * 1024
LOGGING["handlers"]["file_general"]["backupCount"] = 10
LOGGING["handlers"]["file_errors"]["backupCount"] = 180
LOGGING["handlers"]["file_audit"] = {
    "class": "logging.handlers.RotatingFileHandler",
    "filename": str(LOG_DIR / "audit.log"),
    "maxBytes": 50 * 1024 * 1024,
    "backupCount": 90,
    "formatter": "verbose",
    "level": "INFO",
    "encoding": "utf-8",
    "delay": True,
}
LOGGING["root"]["handlers"] = ["file_general", "file_errors", "mail_admins"]
LOGGING["root"]["level"] = "INFO"
LOGGING["loggers"]["django"]["handlers"] = ["file_general"]
LOGGING["loggers"]["core"]["handlers"] = ["file_general", "file_errors"]
LOGGING["loggers"]["core"]["level"] = env.str("CORE_LOG_LEVEL", "INFO")
LOGGING["loggers"]["fuellog.audit"]["handlers"] = ["file_audit"]

if not ADMINS:
    raise RuntimeError("ADMINS is empty, set DJANGO_SUPERUSER_* env vars")
