"""
Unit tests for the subdomain module.

Tests owner root paths, tenant paths and boundary validation for
delegated sub-domains.
"""

import pytest
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from skypath.codec import encode
from skypath.errors import InvalidBoundaryError, InvalidDomainNameError, InvalidNamespaceError
from skypath.subdomain import (
    SUBDOMAIN_NAMESPACE,
    SubdomainPaths,
    path_subdomain,
    root_path_subdomain,
    subdomain_paths
)


LABELS = ['sub1', 'a1', 'lb', 'example', 'com']


class TestRootPathSubDomain:
    """Tests for root_path_subdomain function."""

    def test_owner_zone_root(self):
        """The owner labels end up in forward order under _sub-domain."""
        result = root_path_subdomain(LABELS, 4, 'skydns')
        assert result == '/skydns/_sub-domain/a1/lb/example/com'

    def test_namespace(self):
        assert SUBDOMAIN_NAMESPACE == '_sub-domain'
        assert root_path_subdomain(LABELS, 2, 'coredns').startswith('/coredns/_sub-domain/')

    def test_zero_boundary(self):
        """No owner labels leaves the bare sub-domain namespace."""
        assert root_path_subdomain(LABELS, 0, 'skydns') == '/skydns/_sub-domain'

    def test_full_boundary(self):
        """All labels belong to the owner zone."""
        result = root_path_subdomain(LABELS, 5, 'skydns')
        assert result == '/skydns/_sub-domain/sub1/a1/lb/example/com'

    def test_accepts_tuple(self):
        assert root_path_subdomain(tuple(LABELS), 4, 'skydns') == root_path_subdomain(LABELS, 4, 'skydns')

    def test_labels_not_mutated(self):
        """The caller's label list is left alone."""
        labels = list(LABELS)
        root_path_subdomain(labels, 3, 'skydns')
        assert labels == LABELS

    def test_invalid_namespace(self):
        with pytest.raises(InvalidNamespaceError):
            root_path_subdomain(LABELS, 4, 'sky/dns')


class TestPathSubDomain:
    """Tests for path_subdomain function."""

    def test_tenant_path(self):
        """The tenant label is appended to the owner root."""
        root = root_path_subdomain(LABELS, 4, 'skydns')
        result = path_subdomain(root, 4, LABELS)
        assert result == '/skydns/_sub-domain/a1/lb/example/com/sub1'

    def test_multiple_tenant_labels(self):
        """Tenant labels are appended in reverse order."""
        labels = ['x', 'y', 'a1', 'lb', 'example', 'com']
        root = root_path_subdomain(labels, 4, 'skydns')
        assert path_subdomain(root, 4, labels) == root + '/y/x'

    def test_zero_boundary(self):
        """With no owner zone every label is tenant-specific."""
        root = root_path_subdomain(LABELS, 0, 'skydns')
        result = path_subdomain(root, 0, LABELS)
        assert result == '/skydns/_sub-domain/com/example/lb/a1/sub1'

    def test_full_boundary_returns_root(self):
        """No tenant labels leaves the root unchanged."""
        root = root_path_subdomain(LABELS, 5, 'skydns')
        assert path_subdomain(root, 5, LABELS) == root

    def test_root_with_trailing_slash(self):
        result = path_subdomain('/skydns/_sub-domain/a1/', 1, ['sub1', 'a1'])
        assert result == '/skydns/_sub-domain/a1/sub1'

    def test_labels_not_mutated(self):
        labels = list(LABELS)
        path_subdomain('/skydns/_sub-domain', 2, labels)
        assert labels == LABELS


class TestBoundaryConsistency:
    """The tenant path always extends the owner root path."""

    @pytest.mark.parametrize('boundary', range(len(LABELS) + 1))
    def test_path_extends_root(self, boundary):
        root = root_path_subdomain(LABELS, boundary, 'skydns')
        path = path_subdomain(root, boundary, LABELS)
        tenant = list(reversed(LABELS[:len(LABELS) - boundary]))
        expected = '/'.join([root] + tenant)
        assert path == expected

    @pytest.mark.parametrize('boundary', range(len(LABELS) + 1))
    def test_root_is_owner_zone_encoding(self, boundary):
        """The root is the owner labels laid out in forward order."""
        owner = LABELS[len(LABELS) - boundary:]
        root = root_path_subdomain(LABELS, boundary, 'skydns')
        reversed_owner_name = '.'.join(reversed(owner)) + '.'
        expected = encode(reversed_owner_name, 'skydns').replace('/skydns', '/skydns/_sub-domain', 1)
        assert root == expected


class TestBoundaryViolation:
    """Out-of-range boundaries raise instead of slicing."""

    @pytest.mark.parametrize('boundary', [6, 127, -1])
    def test_root_path_out_of_range(self, boundary):
        with pytest.raises(InvalidBoundaryError) as exc_info:
            root_path_subdomain(LABELS, boundary, 'skydns')
        assert exc_info.value.boundary == boundary
        assert exc_info.value.label_count == len(LABELS)

    @pytest.mark.parametrize('boundary', [6, 127, -1])
    def test_path_out_of_range(self, boundary):
        with pytest.raises(InvalidBoundaryError):
            path_subdomain('/skydns/_sub-domain', boundary, LABELS)

    @pytest.mark.parametrize('boundary', [True, '2', 2.0, None])
    def test_non_integer_boundary(self, boundary):
        with pytest.raises(InvalidBoundaryError):
            root_path_subdomain(LABELS, boundary, 'skydns')
        with pytest.raises(InvalidBoundaryError):
            path_subdomain('/skydns/_sub-domain', boundary, LABELS)

    def test_empty_labels(self):
        """Only a zero boundary fits an empty label list."""
        assert root_path_subdomain([], 0, 'skydns') == '/skydns/_sub-domain'
        with pytest.raises(InvalidBoundaryError):
            root_path_subdomain([], 1, 'skydns')


class TestLabelHandling:
    """Owner labels are re-split, tenant labels are used verbatim."""

    def test_dotted_owner_label_is_split(self):
        result = root_path_subdomain(['sub1', 'a.b', 'example', 'com'], 3, 'skydns')
        assert result == '/skydns/_sub-domain/b/a/example/com'

    def test_escaped_owner_label_stays_whole(self):
        result = root_path_subdomain(['sub1', 'a\\.b', 'example', 'com'], 3, 'skydns')
        assert result == '/skydns/_sub-domain/a\\.b/example/com'

    def test_tenant_label_appended_verbatim(self):
        labels = ['x.y', 'a1', 'example', 'com']
        root = root_path_subdomain(labels, 3, 'skydns')
        assert path_subdomain(root, 3, labels) == root + '/x.y'

    def test_slash_in_owner_label_rejected(self):
        with pytest.raises(InvalidDomainNameError):
            root_path_subdomain(['sub1', 'a/b', 'com'], 2, 'skydns')


class TestSubdomainPaths:
    """Tests for the subdomain_paths convenience function."""

    def test_from_name(self):
        result = subdomain_paths('sub1.a1.lb.example.com.', 4, 'skydns')
        assert result == SubdomainPaths(
            root='/skydns/_sub-domain/a1/lb/example/com',
            path='/skydns/_sub-domain/a1/lb/example/com/sub1'
        )

    def test_boundary_checked_against_name(self):
        with pytest.raises(InvalidBoundaryError):
            subdomain_paths('a1.example.com.', 4, 'skydns')
