"""
SkyDNS Keyspace Path Library

This library provides tools for:
- Encoding domain names into key-value store paths and decoding them back
- Computing range-scan prefixes for wildcard queries
- Building the paths of delegated sub-domains
"""

from .codec import (
    decode,
    encode,
    encode_with_wildcard,
    matches_wildcard,
)
from .config import KeyspaceConfig, load_config
from .errors import (
    InvalidBoundaryError,
    InvalidDomainNameError,
    InvalidNamespaceError,
    MalformedPathError,
    SkyPathError,
)
from .labels import WILDCARD_TOKENS, is_wildcard, join_labels, split_domain_name
from .subdomain import (
    SUBDOMAIN_NAMESPACE,
    SubdomainPaths,
    path_subdomain,
    root_path_subdomain,
    subdomain_paths,
)

__all__ = [
    # Codec
    'encode',
    'decode',
    'encode_with_wildcard',
    'matches_wildcard',
    # Sub-domains
    'SUBDOMAIN_NAMESPACE',
    'SubdomainPaths',
    'root_path_subdomain',
    'path_subdomain',
    'subdomain_paths',
    # Labels
    'WILDCARD_TOKENS',
    'split_domain_name',
    'join_labels',
    'is_wildcard',
    # Config
    'KeyspaceConfig',
    'load_config',
    # Errors
    'SkyPathError',
    'InvalidDomainNameError',
    'MalformedPathError',
    'InvalidBoundaryError',
    'InvalidNamespaceError',
]

__version__ = '1.0.0'
