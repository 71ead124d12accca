class GameShelfError(Exception):
    """Base for every failure the store or the launcher reports."""

# ──────────────────────────────────────────────────────────────────────────────
# Store
# ──────────────────────────────────────────────────────────────────────────────

class StoreError(GameShelfError):
    pass

class StoreConnectionError(StoreError):
    """The database file could not be opened or created."""

class SchemaError(StoreError):
    pass

class WriteError(StoreError):
    pass

class ReadError(StoreError):
    pass

# ──────────────────────────────────────────────────────────────────────────────
# Launcher
# ──────────────────────────────────────────────────────────────────────────────

class LaunchError(GameShelfError):
    pass

class InvalidPathError(LaunchError):
    def __init__(self, path: str):
        super().__init__(f"Invalid path: {path}")
        self.path = path

class SpawnError(LaunchError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not start {path}: {reason}")
        self.path = path
        self.reason = reason
