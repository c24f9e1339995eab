import logging
import os

FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'
DEFAULT_LEVEL = os.environ.get("OLELO_LOG_LEVEL", "INFO")


def setup_logging(level=None):
    """
    Configure the root logger once for the olelo entry points (app, demo).
    Library modules only ever call logging.getLogger(__name__).
    """
    level_name = (level or DEFAULT_LEVEL).upper()
    logging.basicConfig(format=FORMAT, level=getattr(logging, level_name, logging.INFO))
