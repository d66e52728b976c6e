#########################################################
#                                                       #
# DEFAULT CONFIG                                        #
#                                                       #
# !!!! DO NOT UPDATE THIS FILE WITH LOCAL SETTINGS !!!! #
# Create a config.py file to override config values     #
#                                                       #
#########################################################

# GENERAL
DEBUG_MODE = False  # Enables debug mode for more logging

# LOGGING
LOGGING_LEVEL = "INFO"  # Any loguru level name
LOG_FILE = None  # Set to a path to also write logs to a file
LOG_ROTATION = "10 MB"

# Override values with environment specific config
try:
    from config import *
except ImportError as e:
    if e.name == "config":
        pass
    else:
        raise
