import inspect
import logging
import os
from functools import wraps

from ditatools.core.constants import Constants

"""
Logging
"""

FORMAT = '%(asctime)s %(levelname)s: %(message)s'


def create_log_file():
    log_folder = Constants.LOG_FOLDER.value
    if not os.path.exists(log_folder):
        os.makedirs(log_folder)
    log_filename = os.path.join(log_folder, 'ditatools.log')
    if os.path.exists(log_filename):
        with open(log_filename, 'w'):  # clear file contents
            pass
    return log_filename


class DitaLogger(logging.Logger):

    def __init__(self, name):
        super().__init__(name)
        self.setLevel(logging.DEBUG)
        ch = logging.StreamHandler()
        ch.setLevel(logging.WARNING)
        ch.setFormatter(logging.Formatter(FORMAT))
        self.addHandler(ch)
        try:
            log_filename = create_log_file()
        except OSError as e:
            self.warning('Cannot create a log file in %s (%s), logging to the console only',
                         Constants.LOG_FOLDER.value, e)
            return
        fh = logging.FileHandler(log_filename, encoding='utf-8')
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(FORMAT))
        self.addHandler(fh)


logging.setLoggerClass(DitaLogger)
logger = logging.getLogger('ditatools')
logging.setLoggerClass(logging.Logger)  # other libraries keep plain loggers

"""
Auxiliary debugging functions
"""


def debug(func):
    name = func.__qualname__

    @wraps(func)
    def wrapper(*args, **kwargs):
        logger.debug('Running ' + name)
        return func(*args, **kwargs)

    return wrapper


def debugmethods(cls):
    for k, v in list(vars(cls).items()):
        if inspect.isfunction(v) and not k.startswith('__'):
            setattr(cls, k, debug(v))
    return cls
