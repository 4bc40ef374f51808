import logging
from collections import namedtuple

from django.core.exceptions import ImproperlyConfigured

from dailyfile.utils import DEFAULT_DATE_PATTERN, format_date, try_mkdir_for_file

log = logging.getLogger('main')

"""
DailyFileConfig is the one-shot configuration of a DailyFileHandler.
Fields
- filename: template with a single %s slot for the formatted date.
- date_pattern: strftime pattern used to render the date.
- append: True appends, False truncates, None leaves the choice to the appender.
"""
DailyFileConfig = namedtuple(
    'DailyFileConfig',
    ['filename', 'date_pattern', 'append'],
    defaults=(DEFAULT_DATE_PATTERN, None),
)


def resolve_filename(template, date_pattern=DEFAULT_DATE_PATTERN, day=None):
    date_str = format_date(date_pattern, day)
    try:
        return template % date_str
    except (TypeError, ValueError) as e:
        raise ImproperlyConfigured(
            'file template %r must contain exactly one %%s placeholder' % template
        ) from e


class BaseAppender:
    """
    Interface of the file-writing capability a DailyFileHandler delegates to.
    The appender owns the stream, the formatter and the append/truncate choice.
    """

    def set_file(self, filename, append=True):
        raise NotImplementedError('subclasses of BaseAppender must provide a set_file() method')

    def set_formatter(self, fmt):
        raise NotImplementedError('subclasses of BaseAppender must provide a set_formatter() method')

    def write(self, record):
        raise NotImplementedError('subclasses of BaseAppender must provide a write() method')

    def flush(self):
        pass

    def close(self):
        pass


class FileAppender(BaseAppender):
    handler = None
    formatter = None

    def __init__(self, encoding='utf-8', delay=False):
        self.encoding = encoding
        self.delay = delay

    @property
    def filename(self):
        return self.handler.baseFilename if self.handler else None

    def set_file(self, filename, append=True):
        # the current stream stays open until the new one is in place
        try_mkdir_for_file(filename)
        mode = 'a' if append else 'w'
        handler = logging.FileHandler(filename, mode=mode, encoding=self.encoding, delay=self.delay)
        handler.setFormatter(self.formatter)
        self.close()
        self.handler = handler
        log.debug('file_appender|open|filename=%s|mode=%s', filename, mode)

    def set_formatter(self, fmt):
        self.formatter = fmt
        if self.handler:
            self.handler.setFormatter(fmt)

    def write(self, record):
        if self.handler is None:
            raise ImproperlyConfigured('FileAppender.write() called before set_file()')
        self.handler.emit(record)

    def flush(self):
        if self.handler:
            self.handler.flush()

    def close(self):
        if self.handler is None:
            return
        log.debug('file_appender|close|filename=%s', self.handler.baseFilename)
        handler, self.handler = self.handler, None
        handler.close()
