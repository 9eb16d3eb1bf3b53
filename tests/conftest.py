"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
sample JSON API resources shared by the test suite.
"""

from __future__ import annotations

from typing import Any

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models and value objects")
    config.addinivalue_line("markers", "wire: Wire (JSON API resource) conversions")
    config.addinivalue_line("markers", "cli: CLI tests")
    config.addinivalue_line("markers", "property: Hypothesis property-based tests")
    config.addinivalue_line(
        "markers", "tra: Test Responsibility Anchor (TRA) - namespace.Anchor format"
    )
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow, 4=manual)",
    )


@pytest.fixture
def object_resource() -> dict[str, Any]:
    """A fully populated objects resource, as returned by the service."""
    return {
        "kind": "storage#object",
        "id": "my-bucket/reports/q1.csv/1420070400123000",
        "selfLink": "https://www.googleapis.com/storage/v1/b/my-bucket/o/reports%2Fq1.csv",
        "mediaLink": "https://www.googleapis.com/download/storage/v1/b/my-bucket/o/reports%2Fq1.csv?alt=media",
        "name": "reports/q1.csv",
        "bucket": "my-bucket",
        "generation": "1420070400123000",
        "metageneration": "2",
        "contentType": "text/csv",
        "contentEncoding": "gzip",
        "contentDisposition": "attachment; filename=q1.csv",
        "contentLanguage": "en",
        "cacheControl": "no-cache",
        "md5Hash": "XrY7u+Ae7tCTyyK7j1rNww==",
        "crc32c": "yZRlqg==",
        "etag": "CLDc7aKR1MICEAI=",
        "size": "2048",
        "componentCount": 1,
        "metadata": {"owner-team": "finance", "quarter": "Q1"},
        "acl": [
            {"entity": "user-jane@example.com", "role": "OWNER"},
            {"entity": "allUsers", "role": "READER"},
        ],
        "owner": {"entity": "user-jane@example.com"},
        "updated": "2015-01-01T00:00:00.123Z",
        "timeDeleted": "2015-02-01T12:30:00.000Z",
    }


@pytest.fixture
def bucket_resource() -> dict[str, Any]:
    """A buckets resource with CORS rules and ACLs."""
    return {
        "kind": "storage#bucket",
        "id": "my-bucket",
        "selfLink": "https://www.googleapis.com/storage/v1/b/my-bucket",
        "name": "my-bucket",
        "owner": {"entity": "project-owners-123456"},
        "etag": "CAI=",
        "location": "EU",
        "storageClass": "STANDARD",
        "timeCreated": "2014-12-31T23:59:59.000Z",
        "metageneration": "2",
        "versioning": {"enabled": True},
        "website": {"mainPageSuffix": "index.html", "notFoundPage": "404.html"},
        "cors": [
            {
                "maxAgeSeconds": 3600,
                "method": ["GET", "head"],
                "origin": ["https://example.com", "*"],
                "responseHeader": ["Content-Type"],
            },
            {"method": ["PUT"], "origin": ["https://upload.example.com"]},
        ],
        "acl": [{"entity": "group-admins@example.com", "role": "OWNER"}],
        "defaultObjectAcl": [{"entity": "domain-example.com", "role": "READER"}],
    }
