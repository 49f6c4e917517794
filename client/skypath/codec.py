"""
Key Path Codec

Maps domain names onto key paths in the hierarchical key-value store and
back. Labels are stored in reverse order, top-level domain first:

    service.staging.skydns.local.  ->  /skydns/local/skydns/staging/service

so every name under a common suffix shares a common key prefix and can be
fetched with a single range scan.
"""

import logging
from typing import List, Optional, Tuple

from .errors import InvalidNamespaceError, MalformedPathError
from .labels import SEPARATOR, is_wildcard, join_labels, split_domain_name

logger = logging.getLogger(__name__)


def validate_namespace(prefix: str) -> str:
    """
    Check that a namespace prefix is a single non-empty path segment.

    Args:
        prefix: Namespace such as 'skydns'

    Returns:
        The prefix, unchanged

    Raises:
        InvalidNamespaceError: If the prefix is empty, not a string or
            contains a '/'
    """
    if not isinstance(prefix, str) or not prefix or SEPARATOR in prefix:
        raise InvalidNamespaceError(prefix)
    return prefix


def build_path(namespace: List[str], segments: List[str]) -> str:
    """
    Assemble an absolute key path from namespace and label segments.

    Segments are used as given; callers are responsible for the reversal.

    Example:
        >>> build_path(['skydns'], ['local', 'skydns'])
        '/skydns/local/skydns'
    """
    return SEPARATOR + SEPARATOR.join(namespace + segments)


def _reversed_labels(name: str) -> List[str]:
    labels = split_domain_name(name)
    labels.reverse()
    return labels


def encode(name: str, prefix: str) -> str:
    """
    Convert a domain name into its key path.

    Args:
        name: Domain name, with or without the trailing dot
        prefix: Namespace the records live under (e.g. 'skydns')

    Returns:
        Key path of the form /<prefix>/<tld>/.../<leftmost label>

    Example:
        >>> encode('service.staging.skydns.local.', 'skydns')
        '/skydns/local/skydns/staging/service'
    """
    validate_namespace(prefix)
    return build_path([prefix], _reversed_labels(name))


def _namespace_segments(prefix: str) -> List[str]:
    if not isinstance(prefix, str):
        raise InvalidNamespaceError(prefix)
    segments = prefix.strip(SEPARATOR).split(SEPARATOR)
    if '' in segments:
        raise InvalidNamespaceError(prefix)
    return segments


def decode(path: str, prefix: Optional[str] = None) -> str:
    """
    Convert a key path back into a fully-qualified domain name.

    This is the inverse of encode(). Without a prefix the first segment
    is taken to be the namespace. With a prefix, which may span several
    segments (e.g. 'skydns/_sub-domain'), exactly that namespace is
    stripped and the path must live under it.

    Args:
        path: Key path as produced by encode()
        prefix: Optional namespace the path is expected to live under

    Returns:
        Domain name with a trailing dot

    Raises:
        MalformedPathError: If the path is relative, has empty segments,
            lies outside the given namespace or holds no label after the
            namespace
        InvalidNamespaceError: If the given prefix has empty segments

    Example:
        >>> decode('/skydns/local/skydns/staging/service')
        'service.staging.skydns.local.'
    """
    if not path.startswith(SEPARATOR):
        raise MalformedPathError(path, "path must start with '/'")

    segments = path.split(SEPARATOR)[1:]

    if prefix is None:
        namespace_len = 1
    else:
        namespace = _namespace_segments(prefix)
        if segments[:len(namespace)] != namespace:
            raise MalformedPathError(path, f"not under namespace '/{prefix.strip(SEPARATOR)}'")
        namespace_len = len(namespace)

    if len(segments) <= namespace_len:
        raise MalformedPathError(path, 'expected a namespace and at least one label')
    if '' in segments:
        raise MalformedPathError(path, 'empty path segment')

    labels = segments[namespace_len:]
    labels.reverse()
    return join_labels(labels)


def encode_with_wildcard(name: str, prefix: str) -> Tuple[str, bool]:
    """
    Convert a domain name into a key path usable as a range-scan prefix.

    Works like encode(), but the path is cut off before the first
    wildcard label ('*' or 'any'), counting from the top-level domain.
    For 'service.*.skydns.local.' the scan covers everything under
    skydns.local; the scanned keys must then be filtered against the
    full pattern, see matches_wildcard().

    Args:
        name: Domain name, possibly containing wildcard labels
        prefix: Namespace the records live under

    Returns:
        Tuple of (key_path, matched_wildcard)

    Example:
        >>> encode_with_wildcard('service.*.skydns.local.', 'skydns')
        ('/skydns/local/skydns', True)
    """
    validate_namespace(prefix)
    labels = _reversed_labels(name)

    for i, label in enumerate(labels):
        if is_wildcard(label):
            logger.debug("Wildcard '%s' in %s at depth %d, scanning from parent", label, name, i)
            return build_path([prefix], labels[:i]), True

    return build_path([prefix], labels), False


def matches_wildcard(key: str, pattern: str) -> bool:
    """
    Check whether a scanned key matches a wildcard key pattern.

    The pattern is the full encode() result of the wildcard name. Each
    wildcard segment matches any single key segment, every other segment
    must be equal. Keys below the pattern (extra trailing segments) match
    as well, keys shorter than the pattern do not.

    Args:
        key: Key path returned by the store
        pattern: Key path of the wildcard name

    Returns:
        True if the key is covered by the pattern

    Example:
        >>> matches_wildcard('/skydns/local/skydns/east/service',
        ...                  '/skydns/local/skydns/*/service')
        True
    """
    key_parts = key.split(SEPARATOR)
    pattern_parts = pattern.split(SEPARATOR)

    if len(key_parts) < len(pattern_parts):
        return False

    for key_part, pattern_part in zip(key_parts, pattern_parts):
        if is_wildcard(pattern_part):
            continue
        if key_part != pattern_part:
            return False

    return True
