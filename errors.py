class NetworkBuildError(ValueError):
    """
    A build command was rejected. The network must be discarded afterwards.
    """


class DuplicateTechnology(NetworkBuildError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Attempted to redefine existing technology '{name}'.")
        self.name = name


class InvalidTechnologyName(NetworkBuildError):
    def __init__(self, name: str) -> None:
        super().__init__(f"'{name}' cannot be used as a technology name.")
        self.name = name


class UnknownTechnologyReference(NetworkBuildError):
    def __init__(self, names) -> None:
        names = list(names)
        super().__init__(
            "Attempted to connect undefined technologies: "
            + ", ".join(f"'{n}'" for n in names)
        )
        self.names = names


class NetworkStateError(RuntimeError):
    pass


class NetworkSealed(NetworkStateError):
    def __init__(self) -> None:
        super().__init__("network is already optimised and cannot be changed")


class NetworkNotOptimised(NetworkStateError):
    def __init__(self) -> None:
        super().__init__("call optimise() before reading results")


# ---------------------------------------------------------------- loader

class ConfigError(ValueError):
    """Base class for problems with a configuration source."""

    reason = "is invalid"


class MalformedConfig(ConfigError):
    reason = "is malformed"


class TruncatedConfig(ConfigError):
    reason = "ended prematurely"


class ConfigNotFound(ConfigError):
    reason = "was not found"
