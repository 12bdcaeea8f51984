from .loader import config_from_mapping, load_config

__all__ = [
    "config_from_mapping",
    "load_config",
]
