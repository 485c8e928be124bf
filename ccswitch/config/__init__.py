# -*- coding: utf-8 -*-
from .config import AppConfig
from .utils import (
    get_config_path,
    is_first_run,
    load_config,
    mask_api_key,
    save_config,
    update_config,
)

__all__ = [
    "AppConfig",
    "get_config_path",
    "is_first_run",
    "load_config",
    "mask_api_key",
    "save_config",
    "update_config",
]
