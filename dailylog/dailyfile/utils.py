import os

from django.utils import timezone

DEFAULT_DATE_PATTERN = '%Y%m%d'


def today():
    now = timezone.now()
    if timezone.is_aware(now):
        now = timezone.localtime(now)
    return now.date()


def format_date(pattern, day=None):
    day = day if day is not None else today()
    return day.strftime(pattern)


def try_mkdir_for_file(filename):
    folder = os.path.dirname(filename)
    if folder and not os.path.exists(folder):
        os.makedirs(folder, exist_ok=True)


def env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')
