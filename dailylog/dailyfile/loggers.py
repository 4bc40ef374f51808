import logging

from dailyfile.lib import FileAppender, resolve_filename
from dailyfile.utils import DEFAULT_DATE_PATTERN

log = logging.getLogger('main')


class DailyFileHandler(logging.Handler):
    """
    Writes records to a file whose name carries the date it was configured on,
    e.g. 'logs/daily_%s.log' becomes 'logs/daily_20090908.log'.

    The filename is resolved once, when the template is supplied, and is not
    re-checked afterwards: a process that runs past midnight keeps writing to
    the file it started with.

    When configured through setters, set_date_pattern() must be called before
    set_file(). Passing filename and date_pattern to the constructor (or using
    from_config) resolves them together.
    """
    date_pattern = DEFAULT_DATE_PATTERN

    def __init__(self, filename=None, date_pattern=None, append=None, appender=None,
                 encoding='utf-8', delay=False, level=logging.NOTSET):
        super(DailyFileHandler, self).__init__(level)
        self.appender = appender if appender is not None else FileAppender(encoding=encoding, delay=delay)
        self.filename = None
        if date_pattern is not None:
            self.set_date_pattern(date_pattern)
        if filename is not None:
            self.set_file(filename, append)

    @classmethod
    def from_config(cls, config, **kwargs):
        return cls(
            filename=config.filename,
            date_pattern=config.date_pattern,
            append=config.append,
            **kwargs
        )

    def set_date_pattern(self, pattern):
        self.date_pattern = pattern

    def get_date_pattern(self):
        return self.date_pattern

    def set_file(self, template, append=None):
        if not isinstance(template, str) or not (append is None or isinstance(append, bool)):
            log.warning('set_file|SKIP|unsupported_arguments|template=%r|append=%r', template, append)
            return None

        filename = resolve_filename(template, self.date_pattern)
        self.acquire()
        try:
            if append is None:
                self.appender.set_file(filename)
            else:
                self.appender.set_file(filename, append)
            self.filename = filename
        finally:
            self.release()
        log.info('set_file|resolved|filename=%s|date_pattern=%s', filename, self.date_pattern)
        return filename

    def setFormatter(self, fmt):
        super(DailyFileHandler, self).setFormatter(fmt)
        self.appender.set_formatter(fmt)

    def emit(self, record):
        try:
            self.appender.write(record)
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)

    def flush(self):
        self.acquire()
        try:
            self.appender.flush()
        finally:
            self.release()

    def close(self):
        self.acquire()
        try:
            self.appender.close()
        finally:
            self.release()
        super(DailyFileHandler, self).close()

    def __repr__(self):
        level = logging.getLevelName(self.level)
        return '<%s %s (%s)>' % (self.__class__.__name__, self.filename, level)
