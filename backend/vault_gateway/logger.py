import logging
from logging.handlers import RotatingFileHandler

from vault_gateway.core.settings import get_settings

# Create logger
gateway_logger = logging.getLogger("gateway")
gateway_logger.setLevel(logging.INFO)

# Prevent duplicate handlers
if not gateway_logger.handlers:
    # Rotating file handler: max 5 MB per file, keep 3 backups
    file_handler = RotatingFileHandler(get_settings().log_file, maxBytes=5*1024*1024, backupCount=3)
    formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    file_handler.setFormatter(formatter)
    gateway_logger.addHandler(file_handler)
