from loglet import LogFormat, LogletConfig, configure_logging, get_logger, write_bunyan

configure_logging(LogletConfig(format_type=LogFormat.PRETTY))

logger = get_logger()
logger.on(write_bunyan)

for i in range(3):
    logger.info("Hello, world! %d", i)
    logger.warn({"attempt": i, "limits": {"retries": 3, "backoff_ms": [100, 200, 400]}})
    logger.debug("This is a debug message %s", i)

try:
    1 / 0
except ZeroDivisionError as error:
    logger.error(error)
