import logging

from config import LOG_FILE, LOG_LEVEL

LOG_FILE_ENCODING = "utf-8"

log_formatter = logging.Formatter(
    "%(threadName)s; %(asctime)s; %(levelname)s; %(message)s",
    "%Y-%m-%d %H:%M:%S",
)

stream_handler = logging.StreamHandler()
stream_handler.setFormatter(log_formatter)

# Main app logger
app_logger = logging.getLogger("clinic")
app_logger.setLevel(LOG_LEVEL)
app_logger.addHandler(stream_handler)

if LOG_FILE:
    file_handler = logging.FileHandler(LOG_FILE, encoding=LOG_FILE_ENCODING)
    file_handler.setFormatter(log_formatter)
    app_logger.addHandler(file_handler)
