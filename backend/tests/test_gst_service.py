"""
Tests for GST calculation
"""
from decimal import Decimal
import pytest
from gstkit.core.exceptions import InvalidArgument, LookupMiss
from gstkit.schemas.gst import TaxRate
from gstkit.services.gst_service import (
    calculate_gst,
    calculate_gst_by_category,
    calculate_gst_for_code,
)


class TestCalculateGst:
    def test_intra_state(self, standard_rates):
        result = calculate_gst(1000, standard_rates, False)
        assert result.cgst == Decimal("90")
        assert result.sgst == Decimal("90")
        assert result.igst == 0
        assert result.cess == 0
        assert result.total_tax == Decimal("180")
        assert result.total == Decimal("1180")
        assert result.is_interstate is False

    def test_inter_state(self, standard_rates):
        result = calculate_gst(1000, standard_rates, True)
        assert result.cgst == 0
        assert result.sgst == 0
        assert result.igst == Decimal("180")
        assert result.total == Decimal("1180")
        assert result.is_interstate is True

    @pytest.mark.parametrize("amount", [0, 1, "99.99", "12345.67", 0.5, 1000000])
    def test_total_tax_is_same_either_way_for_symmetric_rates(self, standard_rates, amount):
        intra = calculate_gst(amount, standard_rates, False)
        inter = calculate_gst(amount, standard_rates, True)
        assert abs(intra.total_tax - inter.total_tax) <= Decimal("0.01")

    def test_rates_are_echoed(self, standard_rates):
        result = calculate_gst(1000, standard_rates, False)
        assert result.cgst_rate == Decimal("9")
        assert result.igst_rate == Decimal("18")
        assert result.taxable_amount == Decimal("1000")

    def test_cess_applies_in_both_directions(self):
        rates = TaxRate(cgst_rate=14, sgst_rate=14, igst_rate=28, cess_rate=12)
        intra = calculate_gst(100, rates, False)
        inter = calculate_gst(100, rates, True)
        assert intra.cess == Decimal("12") == inter.cess
        assert intra.total == Decimal("140.00") == inter.total

    def test_components_round_half_up(self, standard_rates):
        # 0.5 * 9% = 0.045
        result = calculate_gst("0.5", standard_rates, False)
        assert result.cgst == Decimal("0.05")
        assert result.sgst == Decimal("0.05")
        assert result.total == Decimal("0.60")

    def test_total_uses_rounded_components(self, standard_rates):
        # 99.99 * 9% = 8.9991 each side
        result = calculate_gst("99.99", standard_rates, False)
        assert result.cgst == Decimal("9.00")
        assert result.total_tax == Decimal("18.00")
        assert result.total == Decimal("117.99")

    def test_amounts_have_two_places(self, standard_rates):
        result = calculate_gst(1000, standard_rates, True)
        for value in (result.cgst, result.sgst, result.igst, result.cess, result.total):
            assert value.as_tuple().exponent == -2

    def test_float_input_has_no_binary_drift(self, standard_rates):
        result = calculate_gst(0.1, standard_rates, True)
        assert result.taxable_amount == Decimal("0.1")
        assert result.igst == Decimal("0.02")

    def test_zero_amount(self, standard_rates):
        result = calculate_gst(0, standard_rates, False)
        assert result.total == 0
        assert result.total_tax == 0

    def test_result_is_immutable(self, standard_rates):
        result = calculate_gst(1000, standard_rates, False)
        with pytest.raises(Exception):
            result.cgst = Decimal("1")

    @pytest.mark.parametrize("amount", [-1, "-0.01", "abc", None, float("nan"), float("inf"), True])
    def test_bad_amount(self, standard_rates, amount):
        with pytest.raises(InvalidArgument):
            calculate_gst(amount, standard_rates, False)

    def test_negative_rate(self):
        rates = TaxRate(cgst_rate=-9, sgst_rate=9, igst_rate=18)
        with pytest.raises(InvalidArgument):
            calculate_gst(100, rates, False)

    def test_negative_cess(self):
        rates = TaxRate(cgst_rate=9, sgst_rate=9, igst_rate=18, cess_rate=-1)
        with pytest.raises(InvalidArgument):
            calculate_gst(100, rates, True)

    @pytest.mark.parametrize("interstate", [False, True])
    def test_amount_too_large_for_decimal_context(self, standard_rates, interstate):
        with pytest.raises(InvalidArgument):
            calculate_gst(10 ** 28, standard_rates, interstate)


class TestCalculateForCode:
    def test_interstate_by_state_code(self):
        result = calculate_gst_for_code("8471", 1000, "27", "29")
        assert result.is_interstate is True
        assert result.igst == Decimal("180")

    def test_intrastate_by_gstin(self):
        result = calculate_gst_for_code("996331", 200, "27AAPFU0939F1ZV", "27ABCDE1234F1Z5")
        assert result.is_interstate is False
        assert result.cgst == Decimal("5")
        assert result.sgst == Decimal("5")
        assert result.total == Decimal("210")

    def test_missing_customer_state_is_intrastate(self):
        result = calculate_gst_for_code("8471", 1000, "27", None)
        assert result.is_interstate is False

    def test_unknown_code(self):
        with pytest.raises(LookupMiss):
            calculate_gst_for_code("1234", 1000, "27", "29")

    def test_negative_amount(self):
        with pytest.raises(InvalidArgument):
            calculate_gst_for_code("8471", -5, "27", "29")

    def test_malformed_state_code(self):
        with pytest.raises(InvalidArgument):
            calculate_gst_for_code("8471", 1000, "7", "07")


class TestCalculateByCategory:
    def test_category(self):
        result = calculate_gst_by_category("GST_12", 500, False)
        assert result.cgst == Decimal("30")
        assert result.total == Decimal("560")

    def test_unknown_category(self):
        with pytest.raises(LookupMiss):
            calculate_gst_by_category("GST_7", 500, False)
