"""Select settings module depending on DJANGO_ENV or DJANGO_SETTINGS_MODULE.


By default, if DJANGO_SETTINGS_MODULE is set explicitly, Django will use it.
This file allows using DJANGO_ENV (dev|prod|test) as a convenient selector.
"""
import os


DJANGO_ENV = os.getenv("DJANGO_ENV")


if DJANGO_ENV == "prod":
    default = "fuellog.settings.prod"
elif DJANGO_ENV == "test":
    default = "fuellog.settings.test"
else:
    default = "fuellog.settings.dev"


# If DJANGO_SETTINGS_MODULE already set externally, don't override it
if not os.getenv("DJANGO_SETTINGS_MODULE"):
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", default)
