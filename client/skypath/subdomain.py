"""
Delegated Sub-domain Paths

Sub-zones handed out to tenants are stored under a reserved namespace
nested in the owner's keyspace, '<prefix>/_sub-domain'. A name is cut in
two at the boundary: the last `boundary` labels form the owner zone whose
root path is shared, the remaining leading labels are the tenant part
stored beneath that root.

    name:     sub1.a1.lb.example.com.   (boundary 4)
    root:     /skydns/_sub-domain/a1/lb/example/com
    path:     /skydns/_sub-domain/a1/lb/example/com/sub1

The owner labels appear in forward order (a1/lb/example/com), not
reversed like an ordinary key. This is the layout existing SkyDNS etcd
data uses for delegated zones, so it is kept as is.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from .codec import build_path, validate_namespace
from .errors import InvalidBoundaryError
from .labels import SEPARATOR, split_domain_name

logger = logging.getLogger(__name__)

SUBDOMAIN_NAMESPACE = '_sub-domain'


@dataclass(frozen=True)
class SubdomainPaths:
    """Owner root path and tenant path of a delegated sub-domain."""

    root: str
    path: str


def _check_boundary(boundary: int, labels: Sequence[str]) -> None:
    # bool is an int subclass but never a meaningful label count
    if isinstance(boundary, bool) or not isinstance(boundary, int):
        raise InvalidBoundaryError(boundary, len(labels))
    if not 0 <= boundary <= len(labels):
        raise InvalidBoundaryError(boundary, len(labels))


def root_path_subdomain(labels: Sequence[str], boundary: int, prefix: str) -> str:
    """
    Build the shared root path of the owner zone of a sub-domain.

    The last `boundary` labels are reversed, joined with dots and encoded
    under '<prefix>/_sub-domain'. Since encoding reverses once more, the
    owner labels end up in forward order in the path.

    Owner labels go through the label splitter again, while
    path_subdomain() appends tenant labels verbatim. An owner label
    holding an escaped dot such as 'a\\.b' therefore stays one segment,
    but a plain 'a.b' is split into two segments (b/a).

    Args:
        labels: Labels of the full name, most significant label last
        boundary: Number of trailing labels belonging to the owner zone
        prefix: Namespace the records live under

    Returns:
        The owner zone root path

    Raises:
        InvalidBoundaryError: If boundary is negative or exceeds len(labels)
        InvalidNamespaceError: If prefix is not a valid namespace

    Example:
        >>> root_path_subdomain(['sub1', 'a1', 'lb', 'example', 'com'], 4, 'skydns')
        '/skydns/_sub-domain/a1/lb/example/com'
    """
    validate_namespace(prefix)
    _check_boundary(boundary, labels)

    owner = list(labels[len(labels) - boundary:])
    owner.reverse()

    encoded = split_domain_name('.'.join(owner))
    encoded.reverse()
    return build_path([prefix, SUBDOMAIN_NAMESPACE], encoded)


def path_subdomain(root: str, boundary: int, labels: Sequence[str]) -> str:
    """
    Build the tenant path of a sub-domain beneath its owner root path.

    The first len(labels) - boundary labels are reversed and appended to
    root as path segments. When no labels are left for the tenant the
    root itself is returned.

    Args:
        root: Owner root path from root_path_subdomain()
        boundary: Number of trailing labels belonging to the owner zone
        labels: Labels of the full name, most significant label last

    Returns:
        The key path the sub-domain's records are stored at

    Raises:
        InvalidBoundaryError: If boundary is negative or exceeds len(labels)
    """
    _check_boundary(boundary, labels)

    tenant = list(labels[:len(labels) - boundary])
    tenant.reverse()

    if not tenant:
        return root
    return SEPARATOR.join([root.rstrip(SEPARATOR)] + tenant)


def subdomain_paths(name: str, boundary: int, prefix: str) -> SubdomainPaths:
    """
    Split a domain name and build both sub-domain paths for it.

    Example:
        >>> subdomain_paths('sub1.a1.lb.example.com.', 4, 'skydns').path
        '/skydns/_sub-domain/a1/lb/example/com/sub1'
    """
    labels = split_domain_name(name)
    root = root_path_subdomain(labels, boundary, prefix)
    path = path_subdomain(root, boundary, labels)
    logger.debug("Sub-domain %s: root=%s path=%s", name, root, path)
    return SubdomainPaths(root=root, path=path)
