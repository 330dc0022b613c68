from pathlib import Path

from allocation.config import get_db_name


BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = 'allocation-insecure-key'

DEBUG = False

INSTALLED_APPS = [
    'dddjango.alloc',
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / get_db_name(),
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

USE_TZ = True
