import os
import logging


def get_logger(name, filename=None, log_dir="Logs"):
    """
    Return a logger that writes to the error stream and to a log file.

    Args:
        name: Logger name shown in every record
        filename: Log file stem (defaults to name)
        log_dir: Directory holding the log files

    Handlers are attached only the first time a name is requested.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)

    if not os.path.exists(log_dir):
        os.makedirs(log_dir)
    fh = logging.FileHandler(os.path.join(log_dir, f"{filename if filename else name}.log"))
    fh.setLevel(logging.DEBUG)
    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    fh.setFormatter(formatter)
    ch.setFormatter(formatter)
    logger.addHandler(fh)
    logger.addHandler(ch)
    return logger
