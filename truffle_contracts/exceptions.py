"""Exceptions raised by truffle_contracts."""


class TruffleContractsError(Exception):
    """Base class for all package errors."""


class WorkspaceRootNotFound(TruffleContractsError):
    """Raised when no workspace root is available to resolve paths against."""

    def __init__(self):
        super().__init__(
            "Workspace root is not defined. Open a Truffle project or set "
            "TRUFFLE_WORKSPACE_ROOT"
        )


class ConfigurationError(TruffleContractsError):
    """Raised when a build-tool configuration file cannot be parsed."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid Truffle configuration {path}: {reason}")


class BuildDirectoryMissing(TruffleContractsError):
    """Raised when the contracts build directory does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Build contracts directory does not exist: {path}")


class ArtifactParseError(TruffleContractsError, ValueError):
    """Raised when a compiled artifact file is not valid JSON."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid JSON in artifact file {path}: {reason}")


class RpcError(TruffleContractsError):
    """Raised when an RPC call returns an error or no response at all."""

    def __init__(self, message=""):
        self.message = message
        super().__init__(f"fetch_deployed_bytecode failed. {message}")
