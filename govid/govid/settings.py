# govid/settings.py
import os
from dotenv import load_dotenv
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "django-insecure-замените-на-свой")

DEBUG = os.getenv("DJANGO_DEBUG", "0") in ("1", "true", "True")

ALLOWED_HOSTS = []


INSTALLED_APPS = [
    "core.apps.CoreConfig",
]

# Проверка реквизитов ничего не хранит — база данных не нужна
DATABASES = {}

LANGUAGE_CODE = "ru-ru"
TIME_ZONE = "Europe/Moscow"
USE_I18N = True
USE_TZ = True

# 📝 Логи
GOVID_LOG_LEVEL = os.getenv("GOVID_LOG_LEVEL", "WARNING").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "core": {
            "handlers": ["console"],
            "level": GOVID_LOG_LEVEL,
            "propagate": False,
        },
    },
}
