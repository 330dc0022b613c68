import inspect
import logging
import os

from dotenv import load_dotenv


load_dotenv()


def get_log_config():
    return (
        os.getenv('ALLOCATION_LOG_FILE', os.path.join(os.getcwd(), 'logs.log')),
        os.getenv('ALLOCATION_LOG_LEVEL', 'DEBUG').upper(),
    )


def get_db_name():
    return os.getenv('ALLOCATION_DB_NAME', 'db.sqlite3')


def get_logger():
    caller_frame = inspect.stack()[1]
    caller_module = caller_frame.frame.f_globals["__name__"]
    logger = logging.getLogger(caller_module)

    if logger.hasHandlers():
        logger.handlers.clear()

    filename, level = get_log_config()
    if not isinstance(logging.getLevelName(level), int):
        level = 'DEBUG'

    file_handler = logging.FileHandler(filename, mode='a')
    formatter = logging.Formatter('%(asctime)s -- %(levelname)s: %(message)s',
                                "%Y-%m-%d %H:%M:%S")
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    logger.setLevel(level)
    return logger
