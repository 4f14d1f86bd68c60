"""
Unit tests for the operation allow-list.
"""

import pytest

from zillow.api.exceptions import InvalidMethodError, ZillowError
from zillow.api.methods import VALID_METHODS, ZillowMethod, validate_method


class TestValidateMethod:
    """validate_method tests"""

    @pytest.mark.parametrize("name", sorted(VALID_METHODS))
    def test_accepts_every_listed_method(self, name):
        assert validate_method(name) == name

    def test_accepts_enum_member(self):
        assert validate_method(ZillowMethod.GET_ZESTIMATE) == "GetZestimate"

    @pytest.mark.parametrize(
        "name",
        ["GetZestimates", "getzestimate", "", " GetZestimate", "GetZestimate.htm", "DeleteProperty"],
    )
    def test_rejects_unknown_method(self, name):
        with pytest.raises(InvalidMethodError) as exc_info:
            validate_method(name)
        assert exc_info.value.method == name
        assert str(exc_info.value) == f"Invalid Zillow API method ({name})"

    def test_invalid_method_is_zillow_error(self):
        with pytest.raises(ZillowError):
            validate_method("Nope")


class TestZillowMethod:
    """ZillowMethod enum tests"""

    def test_method_count(self):
        assert len(VALID_METHODS) == 24

    def test_covers_property_region_and_mortgage_calls(self):
        for name in ("GetDeepSearchResults", "GetRegionChildren", "CalculateHELOC", "GetRateSummary"):
            assert name in VALID_METHODS

    def test_published_spelling_kept(self):
        assert ZillowMethod.CALCULATE_INTEREST_ONLY_VS_TRADITIONAL.value == (
            "CalculateInterstOnlyVsTraditional"
        )
