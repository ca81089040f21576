"""Exceptions for version catalog handling."""


class VersionParseError(ValueError):
    """Raised when a version identifier is not a well-formed dotted-numeric version."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f'Could not interpret version "{identifier}"')


class ManifestError(RuntimeError):
    """Raised when the version manifest document is malformed."""
