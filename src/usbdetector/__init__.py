from loguru import logger

# Library code stays quiet until an application calls util.setup_logging().
logger.disable("usbdetector")
