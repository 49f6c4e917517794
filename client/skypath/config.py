"""Keyspace configuration loaded from environment variables."""

import os
from dataclasses import dataclass

from .codec import validate_namespace

DEFAULT_PREFIX = 'skydns'
PREFIX_ENV = 'SKYDNS_PREFIX'


@dataclass(frozen=True)
class KeyspaceConfig:
    """Namespace the DNS records are stored under in the key-value store."""

    prefix: str = DEFAULT_PREFIX


def load_config() -> KeyspaceConfig:
    """
    Load the keyspace configuration from the environment.

    SKYDNS_PREFIX overrides the namespace; unset or empty falls back to
    'skydns'.

    Raises:
        InvalidNamespaceError: If SKYDNS_PREFIX contains a '/'
    """
    prefix = os.environ.get(PREFIX_ENV) or DEFAULT_PREFIX
    return KeyspaceConfig(prefix=validate_namespace(prefix))
