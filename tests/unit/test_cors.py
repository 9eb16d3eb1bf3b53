"""Unit tests for Cors and Origin.

These tests verify construction, equality and the bucket resource ``cors``
entry encoding. They are pure unit tests with no I/O dependencies.
"""

from __future__ import annotations

import pytest

from storagekit.core.cors import Cors, CorsBuilder, Origin
from storagekit.core.exceptions import (
    InvalidOriginError,
    MissingFieldError,
    UnknownHttpMethodError,
)
from storagekit.core.http_method import HttpMethod


@pytest.mark.core
@pytest.mark.tier(0)
class TestOrigin:
    """Tests for the Origin value object."""

    def test_wildcard_is_shared_instance(self) -> None:
        """Origin.of("*") resolves to the Origin.any() singleton."""
        assert Origin.of("*") is Origin.any()
        assert Origin.any() is Origin.any()

    def test_wildcard_differs_from_concrete_origin(self) -> None:
        assert Origin.of("*") != Origin.of("https://example.com")

    def test_equality_by_value(self) -> None:
        """Origins with the same string are equal and hash alike."""
        first = Origin.of("https://example.com")
        second = Origin.of("https://example.com")

        assert first == second
        assert first is not second
        assert hash(first) == hash(second)

    def test_str_is_value(self) -> None:
        assert str(Origin.of("https://example.com")) == "https://example.com"
        assert str(Origin.any()) == "*"

    def test_of_none_raises(self) -> None:
        with pytest.raises(MissingFieldError) as exc_info:
            Origin.of(None)  # type: ignore[arg-type]

        assert exc_info.value.field == "value"

    @pytest.mark.parametrize(
        ("scheme", "host", "port", "expected"),
        [
            ("https", "example.com", -1, "https://example.com"),
            ("http", "localhost", 8080, "http://localhost:8080"),
            ("http", "127.0.0.1", 0, "http://127.0.0.1:0"),
            ("https", "::1", 8443, "https://[::1]:8443"),
        ],
    )
    def test_from_parts(self, scheme: str, host: str, port: int, expected: str) -> None:
        assert Origin.from_parts(scheme, host, port) == Origin.of(expected)

    def test_from_parts_default_port(self) -> None:
        assert Origin.from_parts("https", "example.com").value == "https://example.com"

    @pytest.mark.parametrize(
        ("scheme", "host", "port"),
        [
            ("1http", "example.com", 80),
            ("ht tp", "example.com", 80),
            ("https", "", 443),
            ("https", "exa mple.com", 443),
            ("https", "example.com", 70000),
            ("https", "example.com", -5),
        ],
    )
    def test_from_parts_invalid_raises(self, scheme: str, host: str, port: int) -> None:
        """Invalid parts raise InvalidOriginError wrapping the syntax error."""
        with pytest.raises(InvalidOriginError) as exc_info:
            Origin.from_parts(scheme, host, port)

        err = exc_info.value
        assert isinstance(err, ValueError)
        assert isinstance(err.cause, ValueError)
        assert err.__cause__ is err.cause
        assert (err.scheme, err.host, err.port) == (scheme, host, port)
        assert err.recovery_hint is not None


@pytest.mark.core
@pytest.mark.tier(0)
class TestCorsBuilder:
    """Tests for building Cors rules."""

    def test_build_empty(self) -> None:
        """A builder with nothing set gives a rule with every field unset."""
        cors = Cors.builder().build()

        assert cors.max_age_seconds is None
        assert cors.methods is None
        assert cors.origins is None
        assert cors.response_headers is None

    def test_build_full(self) -> None:
        cors = (
            Cors.builder()
            .max_age_seconds(3600)
            .methods([HttpMethod.GET, HttpMethod.HEAD])
            .origins([Origin.of("https://example.com"), Origin.any()])
            .response_headers(["Content-Type", "x-goog-meta-team"])
            .build()
        )

        assert cors.max_age_seconds == 3600
        assert cors.methods == (HttpMethod.GET, HttpMethod.HEAD)
        assert cors.origins == (Origin.of("https://example.com"), Origin.any())
        assert cors.response_headers == ("Content-Type", "x-goog-meta-team")

    def test_unset_differs_from_empty(self) -> None:
        """Not calling origins() leaves None; origins([]) gives an empty tuple."""
        unset = Cors.builder().build()
        empty = Cors.builder().origins([]).build()

        assert unset.origins is None
        assert empty.origins == ()
        assert unset != empty

    def test_setters_snapshot_input(self) -> None:
        """Mutating the list after passing it does not change the builder."""
        headers = ["Content-Type"]
        builder = CorsBuilder().response_headers(headers)
        headers.append("ETag")

        assert builder.build().response_headers == ("Content-Type",)

    def test_setters_accept_none(self) -> None:
        cors = (
            Cors.builder()
            .methods([HttpMethod.GET])
            .methods(None)
            .max_age_seconds(None)
            .build()
        )

        assert cors.methods is None
        assert cors.max_age_seconds is None

    def test_setters_accept_generators(self) -> None:
        cors = Cors.builder().methods(m for m in (HttpMethod.PUT,)).build()

        assert cors.methods == (HttpMethod.PUT,)

    def test_to_builder_round_trip(self) -> None:
        cors = (
            Cors.builder()
            .max_age_seconds(60)
            .methods([HttpMethod.POST])
            .origins([Origin.any()])
            .response_headers([])
            .build()
        )

        assert cors.to_builder().build() == cors

    def test_to_builder_allows_modification(self) -> None:
        original = Cors.builder().max_age_seconds(60).build()

        updated = original.to_builder().max_age_seconds(120).build()

        assert updated.max_age_seconds == 120
        assert original.max_age_seconds == 60

    def test_constructor_converts_lists_to_tuples(self) -> None:
        cors = Cors(methods=[HttpMethod.GET])  # type: ignore[arg-type]

        assert cors.methods == (HttpMethod.GET,)

    def test_structural_equality_and_hash(self) -> None:
        first = Cors.builder().max_age_seconds(10).origins([Origin.any()]).build()
        second = Cors.builder().max_age_seconds(10).origins([Origin.of("*")]).build()

        assert first == second
        assert hash(first) == hash(second)
        assert first != Cors.builder().max_age_seconds(11).build()

    def test_immutable(self) -> None:
        cors = Cors.builder().build()

        with pytest.raises(AttributeError):
            cors.max_age_seconds = 5  # type: ignore[misc]


@pytest.mark.wire
@pytest.mark.tier(0)
class TestCorsWire:
    """Tests for Cors.to_wire() and Cors.from_wire()."""

    def test_to_wire_full(self) -> None:
        cors = (
            Cors.builder()
            .max_age_seconds(3600)
            .methods([HttpMethod.GET, HttpMethod.DELETE])
            .origins([Origin.of("https://example.com"), Origin.any()])
            .response_headers(["Content-Type"])
            .build()
        )

        assert cors.to_wire() == {
            "maxAgeSeconds": 3600,
            "method": ["GET", "DELETE"],
            "origin": ["https://example.com", "*"],
            "responseHeader": ["Content-Type"],
        }

    def test_to_wire_omits_unset_fields(self) -> None:
        assert Cors.builder().build().to_wire() == {}

    def test_to_wire_keeps_empty_lists(self) -> None:
        cors = Cors.builder().methods([]).build()

        assert cors.to_wire() == {"method": []}

    def test_from_wire_mixed_case_methods(self) -> None:
        """Method names decode case-insensitively to HttpMethod members."""
        cors = Cors.from_wire({"method": ["GET", "put"]})

        assert cors.methods == (HttpMethod.GET, HttpMethod.PUT)

    def test_from_wire_unknown_method_raises(self) -> None:
        with pytest.raises(UnknownHttpMethodError):
            Cors.from_wire({"method": ["GET", "FETCH"]})

    def test_from_wire_wildcard_origin_is_singleton(self) -> None:
        cors = Cors.from_wire({"origin": ["*", "https://example.com"]})

        assert cors.origins is not None
        assert cors.origins[0] is Origin.any()
        assert cors.origins[1] == Origin.of("https://example.com")

    def test_from_wire_missing_fields_stay_unset(self) -> None:
        cors = Cors.from_wire({"maxAgeSeconds": 10})

        assert cors.max_age_seconds == 10
        assert cors.methods is None
        assert cors.origins is None
        assert cors.response_headers is None

    def test_round_trip(self) -> None:
        resource = {
            "maxAgeSeconds": 300,
            "method": ["OPTIONS", "GET"],
            "origin": ["https://a.example.com"],
            "responseHeader": ["ETag", "Content-Length"],
        }

        cors = Cors.from_wire(resource)  # type: ignore[arg-type]

        assert cors.to_wire() == resource
        assert Cors.from_wire(cors.to_wire()) == cors

    def test_bulk_conversion(self) -> None:
        """from_wire can be mapped over a bucket's cors list directly."""
        rules = list(map(Cors.from_wire, [{"maxAgeSeconds": 1}, {"origin": ["*"]}]))

        assert [rule.max_age_seconds for rule in rules] == [1, None]
        assert rules[1].origins == (Origin.any(),)
