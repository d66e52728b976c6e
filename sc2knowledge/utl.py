import sys

from loguru import logger


def init_logging(config):
    """
    Replaces loguru's default sink with ones set up from the config module.

    Logs go to stderr and, when ``LOG_FILE`` is set, to a rotating file as well.

    :param config: module or object with the logging settings of configs.default_config
    :return: ids of the added sinks
    """
    level = "DEBUG" if config.DEBUG_MODE else config.LOGGING_LEVEL
    logger.remove()
    logger.enable("sc2knowledge")
    sink_ids = [logger.add(sys.stderr, level=level)]
    if config.LOG_FILE:
        sink_ids.append(logger.add(config.LOG_FILE, level=level, rotation=config.LOG_ROTATION))
    logger.debug(f"Logging initialised at level {level}")
    return sink_ids
