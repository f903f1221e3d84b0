# logger_setup.py

import logging
import os

from constants import LOGGER_NAME

def setup_logging(config: dict, log_root: str = 'runs') -> logging.Logger:
    """
    Configures the dedicated "fireworks" logger for one run.

    Records go to the console and to <log_root>/<run_id>/fireworks.log. The
    logger does not propagate, so pygame and other libraries configuring the
    root logger never leak into the run log, and vice versa.

    Data Contract:
    - Inputs:
        - config (dict): Parsed config.json. Uses 'run_id' and the 'logging'
          section ('level', 'format').
        - log_root (str): Directory holding one subdirectory per run.
    - Outputs: logging.Logger - The configured logger.
    - Side Effects: Creates the run directory. Replaces any handlers left by an
      earlier call, closing their files.
    """
    run_id = config['run_id']
    log_config = config['logging']

    run_dir = os.path.join(log_root, run_id)
    os.makedirs(run_dir, exist_ok=True)
    log_file = os.path.join(run_dir, 'fireworks.log')

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_config['level'])
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(log_config['format'])
    for handler in (logging.FileHandler(log_file), logging.StreamHandler()):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized. Run ID: {run_id}. Log file: {log_file}")
    return logger
