from pathlib import Path


class StoreError(Exception):
    pass


class ConfigError(StoreError):
    pass


class NotLoadedError(StoreError):
    def __init__(self, location: Path):
        self.location = location
        super().__init__(f"Data has yet to be loaded from '{location}'")


class PathTraversalError(StoreError, TypeError):
    def __init__(self, path: str, prefix: str):
        self.path = path
        self.prefix = prefix
        super().__init__(f"value at '{prefix}' is not a mapping (path '{path}')")


class DocumentReadError(StoreError):
    def __init__(self, location: Path, reason: str):
        self.location = location
        super().__init__(f"Failed to read document '{location}': {reason}")


class DocumentWriteError(StoreError):
    def __init__(self, location: Path, reason: str):
        self.location = location
        super().__init__(f"Failed to write document '{location}': {reason}")
