import os

from dailyfile.utils import env_flag

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'dailylog-insecure-dev-key')

DEBUG = env_flag('DJANGO_DEBUG')

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    'dailyfile',
]

DATABASES = {}

USE_TZ = True
TIME_ZONE = os.environ.get('TIME_ZONE', 'UTC')

LOG_DIR = os.environ.get('DAILYFILE_LOG_DIR', os.path.join(BASE_DIR, 'logs'))
DAILYFILE_FILE_TEMPLATE = os.environ.get('DAILYFILE_FILE_TEMPLATE', 'daily_%s.log')
DAILYFILE_DATE_PATTERN = os.environ.get('DAILYFILE_DATE_PATTERN', '%Y%m%d')
DAILYFILE_APPEND = env_flag('DAILYFILE_APPEND', default=True)

# filename and date_pattern reach DailyFileHandler in the same constructor call,
# so the date is always rendered with the configured pattern.
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
        'daily': {
            'class': 'dailyfile.loggers.DailyFileHandler',
            'filename': os.path.join(LOG_DIR, DAILYFILE_FILE_TEMPLATE),
            'date_pattern': DAILYFILE_DATE_PATTERN,
            'append': DAILYFILE_APPEND,
            'delay': True,
            'formatter': 'verbose',
        },
    },
    'loggers': {
        'main': {
            'handlers': ['console', 'daily'],
            'level': 'DEBUG' if DEBUG else 'INFO',
        },
    },
}
