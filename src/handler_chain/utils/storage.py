from pathlib import Path
from typing import Optional, Type, TypeVar

import loguru

from ..config_models import Config
from ..constants import CONFIG_FILE_NAME, CONFIG_PATH

T = TypeVar('T')

logger = loguru.logger


class ConfigStorage:
    __instance = None

    def __init__(self, config_path: Path = CONFIG_PATH):
        self.config_path = config_path
        if config_path.is_file():
            self.config = Config.load_from_json(config_path)
        else:
            logger.trace(f"{config_path} not found, using the default config.")
            self.config = Config()

    @classmethod
    def get_instance(cls: Type[T]) -> T:
        if not ConfigStorage.__instance:
            ConfigStorage.__instance = ConfigStorage()
        return ConfigStorage.__instance

    @classmethod
    def load(cls, config_base_path: Optional[Path] = None) -> "ConfigStorage":
        """
        (Re)load the config, replacing the shared instance.
        :param config_base_path: folder containing config.json, defaults to CONFIG_BASE_PATH
        """
        path = config_base_path / CONFIG_FILE_NAME if config_base_path else CONFIG_PATH
        ConfigStorage.__instance = ConfigStorage(path)
        return ConfigStorage.__instance

    @classmethod
    def reset(cls):
        ConfigStorage.__instance = None
