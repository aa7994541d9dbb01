class CritterBattleError(Exception):
    """Base for internal errors."""


class RegistryError(CritterBattleError):
    """Catalog data is inconsistent: duplicate ids, dangling references, bad records."""

    def __init__(self, registry: str, detail: str):
        super().__init__(f"{registry} registry error: {detail}")
        self.registry = registry
        self.detail = detail


class DataIntegrityError(CritterBattleError):
    """Persisted critter or battle data could not be rebuilt."""

    def __init__(self, kind: str, detail: str):
        super().__init__(f"Malformed {kind} data: {detail}")
        self.kind = kind
        self.detail = detail


class InvalidTransitionError(CritterBattleError):
    def __init__(self, current: str, requested: str):
        super().__init__(f"Illegal battle phase transition {current} -> {requested}")
        self.current = current
        self.requested = requested
