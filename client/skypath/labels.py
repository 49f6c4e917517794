"""
Domain Name Label Handling

Splits textual domain names into DNS labels and joins labels back into
fully-qualified names. Parsing is delegated to dnspython so that escapes,
label length limits and empty labels are handled the way DNS expects.
"""

from typing import Iterable, List

import dns.exception
import dns.name

from .errors import InvalidDomainNameError

# Separator between key path segments; never allowed inside a label
SEPARATOR = '/'

# Labels that stand for "any label" in a query name. Matching is exact.
WILDCARD_TOKENS = frozenset({'*', 'any'})


def _label_text(label: bytes) -> str:
    return dns.name.Name([label]).to_text()


def split_domain_name(name: str) -> List[str]:
    """
    Split a domain name into its labels, most significant label last.

    The trailing root dot is optional and never shows up as a label.
    Labels are returned in presentation format, so escaped characters
    stay escaped and join_labels() reproduces the same text. Non-ASCII
    labels are converted to their IDNA form ('bücher' -> 'xn--bcher-kva'),
    which is what gets stored and what decoding gives back.

    Args:
        name: Domain name such as 'service.staging.skydns.local.'

    Returns:
        List of label strings; empty for the root name

    Raises:
        InvalidDomainNameError: If dnspython rejects the name, or a label
            contains '/' and could not be stored as a single path segment

    Example:
        >>> split_domain_name('service.staging.skydns.local.')
        ['service', 'staging', 'skydns', 'local']
    """
    try:
        parsed = dns.name.from_text(name)
    except dns.exception.DNSException as e:
        raise InvalidDomainNameError(name, str(e)) from e

    # from_text() always yields an absolute name; drop the root label
    labels = [_label_text(label) for label in parsed.labels[:-1]]

    if any(SEPARATOR in label for label in labels):
        raise InvalidDomainNameError(name, f"label contains '{SEPARATOR}'")

    return labels


def join_labels(labels: Iterable[str]) -> str:
    """
    Join labels into a fully-qualified name with a trailing dot.

    Args:
        labels: Label strings, most significant label last

    Returns:
        The absolute domain name, '.' when there are no labels

    Example:
        >>> join_labels(['service', 'staging', 'skydns', 'local'])
        'service.staging.skydns.local.'
    """
    return '.'.join(labels) + '.'


def is_wildcard(label: str) -> bool:
    """Check whether a label is one of the wildcard tokens ('*' or 'any')."""
    return label in WILDCARD_TOKENS
