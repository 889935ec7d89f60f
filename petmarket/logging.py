import logging.config
import os
from pathlib import Path

# Ensure logs directory exists
os.makedirs("logs", exist_ok=True)

LOGGING_CONF = Path(__file__).resolve().parent / "logging.conf"

logging.config.fileConfig(LOGGING_CONF, disable_existing_loggers=False)


logger = logging.getLogger("petmarket")
