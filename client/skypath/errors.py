"""
Exceptions for the skypath keyspace mapping.

Every error derives from SkyPathError, which is itself a ValueError so
callers that only guard against bad input keep working.
"""

from typing import Optional


class SkyPathError(ValueError):
    """Base exception for all skypath errors."""


class InvalidDomainNameError(SkyPathError):
    """The label splitter rejected a domain name.

    Attributes:
        name: The domain name as given by the caller.
    """

    def __init__(self, name: str, reason: Optional[str] = None):
        self.name = name
        detail = f": {reason}" if reason else ''
        super().__init__(f"Invalid domain name '{name}'{detail}")


class MalformedPathError(SkyPathError):
    """A key path cannot be decoded back into a domain name.

    Attributes:
        path: The offending key path.
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Malformed key path '{path}': {reason}")


class InvalidBoundaryError(SkyPathError):
    """A sub-domain boundary does not fit the label sequence.

    Attributes:
        boundary: The boundary passed by the caller.
        label_count: Number of labels it was checked against.
    """

    def __init__(self, boundary, label_count: int):
        self.boundary = boundary
        self.label_count = label_count
        super().__init__(
            f"Sub-domain boundary {boundary!r} is outside 0..{label_count}"
        )


class InvalidNamespaceError(SkyPathError):
    """A namespace prefix is empty or contains a path separator.

    Attributes:
        prefix: The rejected prefix.
    """

    def __init__(self, prefix):
        self.prefix = prefix
        super().__init__(
            f"Namespace prefix must be a non-empty name without '/', got {prefix!r}"
        )
