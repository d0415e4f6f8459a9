from .json_handler import JsonHandler
from .yaml_handler import YamlHandler

__all__ = ["JsonHandler", "YamlHandler"]
