"""
Tests for GSTIN validation, state code extraction and interstate classification
"""
import pytest
from gstkit.core.config import settings
from gstkit.core.exceptions import InvalidArgument
from gstkit.services.gstin_service import (
    describe_gstin,
    get_pan_from_gstin,
    get_state_code_from_gstin,
    is_interstate,
    validate_gstin,
)

VALID_GSTINS = ["27AAPFU0939F1ZV", "29ABCDE1234F1Z5", "22AAAAA0000A1Z5", "07AABCU9603RAZP"]

# Replacement character outside the allowed charset for each position
BAD_CHAR_BY_POSITION = {
    0: "A", 1: "B",
    2: "1", 3: "2", 4: "3", 5: "4", 6: "5",
    7: "X", 8: "Y", 9: "Z", 10: "Q",
    11: "7",
    12: "#",
    13: "Y",
    14: "-",
}


class TestValidateGstin:
    @pytest.mark.parametrize("gstin", VALID_GSTINS)
    def test_valid_gstins(self, gstin):
        assert validate_gstin(gstin) is True

    @pytest.mark.parametrize("position", sorted(BAD_CHAR_BY_POSITION))
    def test_single_bad_character_is_rejected(self, position):
        for gstin in VALID_GSTINS:
            mutated = gstin[:position] + BAD_CHAR_BY_POSITION[position] + gstin[position + 1:]
            assert validate_gstin(mutated) is False, mutated

    def test_lowercase_is_rejected(self):
        assert validate_gstin("27aapfu0939f1zv") is False

    def test_entity_code_may_be_a_letter(self):
        assert validate_gstin("27AAPFU0939FAZV") is True

    @pytest.mark.parametrize("value", ["", "27AAPFU0939F1Z", "27AAPFU0939F1ZVX", None, 27, " 27AAPFU0939F1ZV"])
    def test_bad_length_or_type_never_raises(self, value):
        assert validate_gstin(value) is False


class TestGstinParts:
    def test_state_code(self):
        assert get_state_code_from_gstin("27AAPFU0939F1ZV") == "27"
        assert get_state_code_from_gstin("27") == "27"

    def test_state_code_too_short(self):
        assert get_state_code_from_gstin("2") is None
        assert get_state_code_from_gstin("") is None
        assert get_state_code_from_gstin(None) is None

    def test_pan(self):
        assert get_pan_from_gstin("27AAPFU0939F1ZV") == "AAPFU0939F"
        assert get_pan_from_gstin("27AAPFU") is None

    def test_describe_valid(self):
        info = describe_gstin("27AAPFU0939F1ZV")
        assert info.is_valid is True
        assert info.state_code == "27"
        assert info.state_name == "Maharashtra"
        assert info.pan == "AAPFU0939F"

    def test_describe_unknown_state(self):
        info = describe_gstin("99AAPFU0939F1ZV")
        assert info.is_valid is True
        assert info.state_code == "99"
        assert info.state_name is None


class TestIsInterstate:
    def test_distinct_codes(self):
        assert is_interstate("27", "29") is True

    def test_equal_codes(self):
        assert is_interstate("27", "27") is False

    def test_every_distinct_pair(self):
        codes = ["01", "07", "27", "29", "33", "99"]
        for a in codes:
            for b in codes:
                assert is_interstate(a, b) is (a != b)

    def test_accepts_gstins(self):
        assert is_interstate("27AAPFU0939F1ZV", "27ABCDE1234F1Z5") is False
        assert is_interstate("27AAPFU0939F1ZV", "29ABCDE1234F1Z5") is True
        assert is_interstate("27AAPFU0939F1ZV", "29") is True

    def test_whitespace_is_ignored(self):
        assert is_interstate(" 27 ", "27") is False

    @pytest.mark.parametrize("supplier,customer", [(None, "27"), ("27", None), (None, None), ("", "27"), ("27", "  ")])
    def test_missing_state_defaults_to_intra_state(self, supplier, customer):
        assert is_interstate(supplier, customer) is False

    def test_missing_state_uses_explicit_default(self):
        assert is_interstate(None, "27", default=True) is True

    def test_missing_state_uses_configured_default(self, monkeypatch):
        monkeypatch.setattr(settings, "INTERSTATE_WHEN_STATE_UNKNOWN", True)
        assert is_interstate("27", None) is True
        assert is_interstate("27", "27") is False

    @pytest.mark.parametrize("supplier,customer", [
        ("7", "07"),
        ("07", "7"),
        ("2AB", "27"),
        ("27", "MH"),
        ("AB27XYZ", "27"),
    ])
    def test_malformed_state_is_rejected(self, supplier, customer):
        with pytest.raises(InvalidArgument):
            is_interstate(supplier, customer)

    def test_malformed_state_is_rejected_even_with_default(self):
        with pytest.raises(InvalidArgument):
            is_interstate("7", None, default=True)

    def test_unknown_but_well_formed_code_is_classified(self):
        assert is_interstate("99", "27") is True
