"""Tests for fixture models and path inputs."""

import pytest

from pathdrift.errors import InvalidArgument
from pathdrift.models.fixture import DRIFT_PRONE_KINDS, Fixture, Hypothesis, PathKind
from pathdrift.models.geometry import Point, Rect
from pathdrift.models.path import PathInput


def _fixture_data(**overrides) -> dict:
    data = {
        "fixture_id": "fx",
        "view_frame": {"origin_x": 100, "origin_y": 200, "width": 60, "height": 40},
        "path_kind": "rounded_rect",
        "path_local_bounds": {"origin_x": 0, "origin_y": 0, "width": 60, "height": 40},
        "read_count": 3,
    }
    data.update(overrides)
    return data


class TestPathKind:
    """Tests for PathKind parsing."""

    @pytest.mark.parametrize("value,expected", [
        ("rect", PathKind.RECT),
        ("Oval", PathKind.OVAL),
        ("RoundedRect", PathKind.ROUNDED_RECT),
        ("rounded-rect", PathKind.ROUNDED_RECT),
        ("ExplicitElements", PathKind.EXPLICIT_ELEMENTS),
        (PathKind.ARC, PathKind.ARC),
    ])
    def test_parse(self, value, expected):
        """Test members, values and CamelCase names map onto the enum."""
        assert PathKind.parse(value) is expected

    @pytest.mark.parametrize("value", ["triangle", "", None, 3])
    def test_parse_unknown_fails_fast(self, value):
        """Test unrecognized kinds raise InvalidArgument instead of defaulting."""
        with pytest.raises(InvalidArgument):
            PathKind.parse(value)

    def test_drift_prone_kinds(self):
        """Test only rounded rects and explicit-element paths are drift-prone."""
        assert DRIFT_PRONE_KINDS == {PathKind.ROUNDED_RECT, PathKind.EXPLICIT_ELEMENTS}


class TestHypothesis:
    def test_parse(self):
        assert Hypothesis.parse("BUGGY") is Hypothesis.BUGGY

    def test_parse_unknown(self):
        with pytest.raises(InvalidArgument):
            Hypothesis.parse("maybe")


class TestFixture:
    """Tests for Fixture construction and invariants."""

    def test_from_dict(self):
        """Test nested rects and kind string are parsed."""
        fx = Fixture(**_fixture_data())
        assert fx.path_kind is PathKind.ROUNDED_RECT
        assert fx.view_frame == Rect.of(100, 200, 60, 40)
        assert fx.screen_offset == Point(x=100, y=200)
        assert fx.drift_prone

    def test_camel_case_kind(self):
        """Test CamelCase kind names are accepted."""
        assert Fixture(**_fixture_data(path_kind="ExplicitElements")).path_kind is PathKind.EXPLICIT_ELEMENTS

    def test_unknown_kind_raises_invalid_argument(self):
        with pytest.raises(InvalidArgument):
            Fixture(**_fixture_data(path_kind="triangle"))

    def test_negative_read_count_raises_invalid_argument(self):
        """Test negative read counts are rejected, never clamped."""
        with pytest.raises(InvalidArgument):
            Fixture(**_fixture_data(read_count=-1))

    def test_negative_width_raises_invalid_argument(self):
        data = _fixture_data()
        data["path_local_bounds"]["width"] = -10
        with pytest.raises(InvalidArgument):
            Fixture(**data)

    def test_empty_id_raises_invalid_argument(self):
        with pytest.raises(InvalidArgument):
            Fixture(**_fixture_data(fixture_id="  "))

    def test_invalid_argument_is_value_error(self):
        """Test InvalidArgument can be caught as ValueError."""
        with pytest.raises(ValueError):
            Fixture(**_fixture_data(read_count=-5))

    def test_model_validate_raises_invalid_argument(self):
        data = _fixture_data()
        data["view_frame"]["width"] = -1
        with pytest.raises(InvalidArgument, match="fx"):
            Fixture.model_validate(data)

    def test_model_validate_accepts_valid_dict(self):
        assert Fixture.model_validate(_fixture_data()).read_count == 3

    def test_model_validate_json_raises_invalid_argument(self):
        with pytest.raises(InvalidArgument):
            Fixture.model_validate_json('{"fixture_id": "fx", "read_count": 3}')

    @pytest.mark.parametrize("value", [True, False, 3.0, "3"])
    def test_read_count_must_be_a_plain_int(self, value):
        """Test booleans, floats and strings are not coerced into a read count."""
        with pytest.raises(InvalidArgument):
            Fixture(**_fixture_data(read_count=value))

    def test_zero_reads_allowed(self):
        assert Fixture(**_fixture_data(read_count=0)).read_count == 0

    def test_immutable(self, rounded_rect_fixture):
        """Test fixtures cannot be mutated after creation."""
        with pytest.raises(Exception):
            rounded_rect_fixture.read_count = 10
        assert rounded_rect_fixture.read_count == 3

    def test_hashable(self, rounded_rect_fixture, rect_fixture):
        """Test fixtures can key a mapping."""
        mapping = {rounded_rect_fixture: "a", rect_fixture: "b"}
        assert mapping[rounded_rect_fixture] == "a"

    def test_make_path_is_fresh(self, rounded_rect_fixture):
        """Test each call builds a new path with the local bounds."""
        p1 = rounded_rect_fixture.make_path()
        p2 = rounded_rect_fixture.make_path()
        assert p1 is not p2
        assert p1.bounds == rounded_rect_fixture.path_local_bounds
        assert p1.kind is PathKind.ROUNDED_RECT


class TestPathInput:
    """Tests for the mutable path input."""

    def test_translate_in_place(self):
        path = PathInput(PathKind.EXPLICIT_ELEMENTS, Rect.of(0, 0, 10, 10))
        path.translate(100, 200)
        path.translate(100, 200)
        assert path.bounds == Rect.of(200, 400, 10, 10)
        assert path.mutation_count == 2

    def test_copy_is_independent(self):
        """Test mutating a copy leaves the original untouched."""
        path = PathInput(PathKind.EXPLICIT_ELEMENTS, Rect.of(0, 0, 10, 10))
        clone = path.copy()
        clone.translate(5, 5)
        assert path.bounds == Rect.of(0, 0, 10, 10)
        assert clone.mutation_count == 1
        assert path.mutation_count == 0
