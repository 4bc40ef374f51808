import logging

from django.core.management.base import BaseCommand

from dailyfile.lib import DailyFileConfig
from dailyfile.loggers import DailyFileHandler
from dailyfile.utils import DEFAULT_DATE_PATTERN

LINE_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


class Command(BaseCommand):
    help = 'Resolve a dated log file name and write a line to it'

    def add_arguments(self, parser):
        parser.add_argument(
            '--file',
            type=str,
            help='File template with a %%s slot for the date',
            required=True,
        )
        parser.add_argument(
            '--date-pattern',
            type=str,
            default=DEFAULT_DATE_PATTERN,
            help='strftime pattern for the date',
        )
        parser.add_argument(
            '--append',
            dest='append',
            action='store_true',
            default=None,
            help='Append to the file',
        )
        parser.add_argument(
            '--truncate',
            dest='append',
            action='store_false',
            default=None,
            help='Overwrite the file',
        )
        parser.add_argument(
            '--message',
            type=str,
            help='Line to write',
        )

    def handle(self, *args, **kwargs):
        config = DailyFileConfig(
            filename=kwargs['file'],
            date_pattern=kwargs['date_pattern'],
            append=kwargs['append'],
        )
        message = kwargs['message']

        handler = DailyFileHandler.from_config(config)
        handler.setFormatter(logging.Formatter(LINE_FORMAT))
        self.stdout.write(self.style.SUCCESS('Log file: {}'.format(handler.filename)))

        if message is None:
            handler.close()
            return

        logger = logging.getLogger('dailyfile.logfile')
        logger.setLevel(logging.INFO)
        logger.propagate = False
        logger.addHandler(handler)
        try:
            logger.info(message)
        finally:
            logger.removeHandler(handler)
            handler.close()

        self.stdout.write(self.style.SUCCESS('Wrote: {}'.format(message)))
