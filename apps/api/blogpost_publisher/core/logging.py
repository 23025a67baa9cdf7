from loguru import logger
import sys

def setup_logging(level: str = "INFO"):
    logger.remove()
    # diagnose=False keeps local variables (API keys, request bodies) out of tracebacks
    logger.add(sys.stdout, level=level.upper(), backtrace=False, diagnose=False)
    return logger
