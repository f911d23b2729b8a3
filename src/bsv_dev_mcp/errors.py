from __future__ import annotations

from pathlib import Path


class BsvMcpError(Exception):
    """Base class for errors reported back to the MCP client."""


class ConfigurationError(BsvMcpError):
    """Startup configuration is missing or invalid. Fatal."""


class ScopeNotFound(BsvMcpError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Repository directory not found: {path}")


class MissingRepository(BsvMcpError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(
            f"BRCs repository directory not found at {path}. "
            "Ensure you've cloned the repository."
        )


class ResourceNotFound(BsvMcpError):
    def __init__(self, identifier: str, base: Path):
        self.identifier = identifier
        self.base = base
        super().__init__(
            f"Could not find BRC {identifier} in any known directory under {base}. "
            "The BRC may not exist or might be in an unexpected location."
        )
