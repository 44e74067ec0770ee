import os
from pathlib import Path

"""
Path
"""

'''
CONFIG_BASE_PATH:
Case1 User-defined: "$CONFIG_BASE_PATH"
Case2 Default: "current working directory" -> "configs"
The -c/--config command line option overrides both.
'''

ROOT_PATH = Path(__file__).parent

if path := os.getenv("CONFIG_BASE_PATH"):
    CONFIG_BASE_PATH = Path(path)
else:
    CONFIG_BASE_PATH = Path.cwd() / "configs"

CONFIG_FILE_NAME = "config.json"
CONFIG_PATH = CONFIG_BASE_PATH / CONFIG_FILE_NAME

LOCALE_PATH = ROOT_PATH / "locales"
LOCALE_DOMAIN = "base"
