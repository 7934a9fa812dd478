"""Tests for scalar values and their grammar."""

import math

import pytest
from pydantic import ValidationError

from reaper_save.models.attribute import (
    AttributeKind, Float, Int, Quote, ReaperString, Uid, UNumber,
)
from reaper_save.rpp.parser import SCALAR_ALTERNATIVES, deserialize_attribute
from reaper_save.rpp.writer import format_float, write_attribute


class TestOrderedChoice:
    """Each bare token resolves to exactly one variant."""

    def test_uid(self):
        rest, value = deserialize_attribute("{A365E92F-3BF8-24E8-1FF4-8FDF30208BCB}")
        assert rest == ""
        assert value == Uid(value="A365E92F-3BF8-24E8-1FF4-8FDF30208BCB")
        assert value.kind is AttributeKind.UID

    def test_uid_is_deterministic(self):
        token = "{A365E92F-3BF8-24E8-1FF4-8FDF30208BCB}"
        kinds = {type(deserialize_attribute(token)[1]) for _ in range(5)}
        assert kinds == {Uid}

    def test_double_quoted(self):
        rest, value = deserialize_attribute('"VST: ReaComp (Cockos)" reacomp.dll')
        assert rest == " reacomp.dll"
        assert value == ReaperString.double("VST: ReaComp (Cockos)")

    def test_single_quoted(self):
        assert deserialize_attribute("'a b'")[1] == ReaperString.single("a b")

    def test_empty_quotes_are_values(self):
        assert deserialize_attribute("''")[1] == ReaperString.single("")
        assert deserialize_attribute('""')[1] == ReaperString.double("")

    def test_int(self):
        rest, value = deserialize_attribute("-12 0")
        assert rest == " 0"
        assert value == Int(value=-12)

    def test_year_like_token_is_int(self):
        assert deserialize_attribute("1691227194")[1] == Int(value=1691227194)

    def test_float(self):
        assert deserialize_attribute("0.25")[1] == Float(value=0.25)

    def test_int_overflow_is_float(self):
        value = deserialize_attribute("9223372036854775808")[1]
        assert isinstance(value, Float)
        assert value.value == 9223372036854775808.0

    def test_unumber(self):
        assert deserialize_attribute("-1:U")[1] == UNumber(value=-1)

    def test_unumber_needs_integer_digits(self):
        value = deserialize_attribute("1.5:U")[1]
        assert value == ReaperString.unquoted("1.5:U")

    def test_unquoted_fallback(self):
        rest, value = deserialize_attribute("DragonflyPlateReverb-vst.so 0")
        assert rest == " 0"
        assert value == ReaperString.unquoted("DragonflyPlateReverb-vst.so")

    def test_plugin_id_token_is_unquoted(self):
        token = "1919247213<5653547265636D726561636F6D700000>"
        assert deserialize_attribute(token)[1] == ReaperString.unquoted(token)

    def test_partial_match_falls_through(self):
        assert deserialize_attribute('"abc"def')[1] == ReaperString.unquoted('"abc"def')
        assert deserialize_attribute("{ABC}x")[1] == ReaperString.unquoted("{ABC}x")

    def test_quote_not_closed_on_its_line(self):
        rest, value = deserialize_attribute('"a\r\nb"')
        assert value == ReaperString.unquoted('"a')
        assert rest == '\r\nb"'

    def test_empty_token(self):
        assert deserialize_attribute("") == ("", ReaperString.unquoted(""))

    def test_fallback_is_last(self):
        names = [name for name, _ in SCALAR_ALTERNATIVES]
        assert names[-1] == "unquoted string"
        assert names.index("integer") < names.index("float") < names.index("u-number")


class TestSpelling:
    """Numbers are written back the way they were read."""

    @pytest.mark.parametrize("token", ["1.0", "+5", "0.250", "1e3", "Infinity", "-007"])
    def test_spelling_survives(self, token):
        assert write_attribute(deserialize_attribute(token)[1]) == token

    def test_spelling_is_not_part_of_equality(self):
        assert Float(value=0.25, text="0.250") == Float(value=0.25)
        assert hash(Int(value=5, text="+5")) == hash(Int(value=5))

    def test_canonical_rendering(self):
        assert write_attribute(Int(value=-3)) == "-3"
        assert write_attribute(UNumber(value=-1)) == "-1:U"
        assert write_attribute(Float(value=1.0)) == "1"
        assert write_attribute(Uid(value="ABC-1")) == "{ABC-1}"
        assert write_attribute(ReaperString.single("")) == "''"
        assert write_attribute(ReaperString.double("a b")) == '"a b"'
        assert write_attribute(ReaperString.unquoted("PLATE")) == "PLATE"

    @pytest.mark.parametrize("value, text", [
        (0.25, "0.25"),
        (2.0, "2"),
        (1e20, "100000000000000000000"),
        (1.5e-7, "0.00000015"),
        (-0.0, "-0"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
        (math.nan, "NaN"),
    ])
    def test_format_float(self, value, text):
        assert format_float(value) == text


class TestFloat:
    def test_nan_equals_nan(self):
        assert Float(value=math.nan) == Float(value=math.nan)
        assert hash(Float(value=math.nan)) == hash(Float(value=math.nan))

    def test_signed_zero(self):
        assert Float(value=-0.0) == Float(value=0.0)

    def test_total_order(self):
        values = [Float(value=math.nan), Float(value=1.0), Float(value=-2.0)]
        assert [v.value for v in sorted(values)][:2] == [-2.0, 1.0]
        assert math.isnan(sorted(values)[-1].value)

    def test_not_equal_to_int(self):
        assert Float(value=1.0) != Int(value=1)

    def test_usable_in_sets(self):
        assert len({Float(value=0.5), Float(value=0.5, text="0.50"), Int(value=1)}) == 2


class TestValidation:
    def test_int_range(self):
        with pytest.raises(ValidationError):
            Int(value=2 ** 63)

    def test_uid_characters(self):
        with pytest.raises(ValidationError):
            Uid(value="not-a-uid!")

    def test_unquoted_string_without_whitespace(self):
        with pytest.raises(ValidationError):
            ReaperString.unquoted("a b")

    def test_quoted_string_without_its_quote(self):
        with pytest.raises(ValidationError):
            ReaperString.double('say "hi"')

    def test_no_line_breaks(self):
        with pytest.raises(ValidationError):
            ReaperString.double("a\nb")


class TestWithValue:
    def test_keeps_quote_style(self):
        assert ReaperString.single("a").with_value("b c") == ReaperString.single("b c")

    def test_unquoted_switches_to_double_quotes(self):
        new = ReaperString.unquoted("a.wav").with_value("my take.wav")
        assert new.quote is Quote.DOUBLE

    def test_double_switches_to_single_quotes(self):
        new = ReaperString.double("a").with_value('say "hi"')
        assert new == ReaperString.single('say "hi"')
