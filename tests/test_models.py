"""Tests for coordinate parsing and the component model."""

import pytest

from jclec.models import (
    Component,
    Coordinates,
    CoordinateError,
    LATEST_VERSION,
    VerificationResult,
    VerificationStatus,
    class_entry_path
)


def test_parse_full_coordinates():
    """Test groupId:artifactId:version parsing."""
    coords = Coordinates.parse("org.apache.logging.log4j:log4j-core:2.14.1")

    assert coords.group_id == "org.apache.logging.log4j"
    assert coords.artifact_id == "log4j-core"
    assert coords.version == "2.14.1"
    assert coords.packaging == "jar"
    assert coords.repository_path() == (
        "org/apache/logging/log4j/log4j-core/2.14.1/log4j-core-2.14.1.jar"
    )


def test_missing_version_means_latest():
    coords = Coordinates.parse("org.springframework:spring-beans")
    assert coords.version == LATEST_VERSION
    assert coords.is_latest
    assert coords.with_version("5.3.0").version == "5.3.0"


def test_extra_parts_are_ignored():
    coords = Coordinates.parse("g:a:1.0:sources")
    assert str(coords) == "g:a:1.0"


@pytest.mark.parametrize("bad", ["commons-collections", "", ":artifact:1.0", "group::1.0"])
def test_malformed_coordinates(bad):
    with pytest.raises(CoordinateError):
        Coordinates.parse(bad)


def test_class_entry_path():
    assert class_entry_path("com.foo.Bar") == "com/foo/Bar.class"
    assert class_entry_path("com.foo.Outer$Inner") == "com/foo/Outer$Inner.class"


def test_component_coordinates_presence():
    assert Component("X", "g:a:1.0").has_coordinates
    assert not Component("X", None).has_coordinates
    assert not Component("X", "   ").has_coordinates


def test_verification_result_found_flag():
    assert VerificationResult("g:a:1", "a.B", VerificationStatus.FOUND).found
    assert not VerificationResult("g:a:1", "a.B", VerificationStatus.NOT_FOUND).found
    error = VerificationResult.error("g:a:1", "a.B", "boom")
    assert error.status == VerificationStatus.ERROR
    assert not error.found


def test_component_stores_classes_as_tuple():
    classes = ["a.One"]
    component = Component("X", None, classes)
    classes.append("a.Two")

    assert component.vulnerable_classes == ("a.One",)
