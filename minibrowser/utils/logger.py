import logging

from minibrowser.setting.config import Config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

def get_logger(name=None):
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=Config.log_level, format=LOG_FORMAT)
    return logger
