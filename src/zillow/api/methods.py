"""
Zillow web service operations.

Only the operations listed here can be called; anything else is a
programming error and is rejected before a request is made.
"""

from enum import Enum

from zillow.api.exceptions import InvalidMethodError


class ZillowMethod(str, Enum):
    """Operations exposed by the Zillow web service"""

    # Property
    GET_ZESTIMATE = "GetZestimate"
    GET_SEARCH_RESULTS = "GetSearchResults"
    GET_CHART = "GetChart"
    GET_COMPS = "GetComps"
    GET_DEEP_COMPS = "GetDeepComps"
    GET_DEEP_SEARCH_RESULTS = "GetDeepSearchResults"
    GET_UPDATED_PROPERTY_DETAILS = "GetUpdatedPropertyDetails"

    # Neighborhood
    GET_DEMOGRAPHICS = "GetDemographics"
    GET_REGION_CHILDREN = "GetRegionChildren"
    GET_REGION_CHART = "GetRegionChart"

    # Mortgage
    GET_RATE_SUMMARY = "GetRateSummary"
    GET_MONTHLY_PAYMENTS = "GetMonthlyPayments"
    CALCULATE_MONTHLY_PAYMENTS_ADVANCED = "CalculateMonthlyPaymentsAdvanced"
    CALCULATE_AFFORDABILITY = "CalculateAffordability"
    CALCULATE_REFINANCE = "CalculateRefinance"
    CALCULATE_ADJUSTABLE_MORTGAGE = "CalculateAdjustableMortgage"
    CALCULATE_MORTGAGE_TERMS = "CalculateMortgageTerms"
    CALCULATE_DISCOUNT_POINTS = "CalculateDiscountPoints"
    CALCULATE_BI_WEEKLY_PAYMENT = "CalculateBiWeeklyPayment"
    CALCULATE_NO_COST_VS_TRADITIONAL = "CalculateNoCostVsTraditional"
    CALCULATE_TAX_SAVINGS = "CalculateTaxSavings"
    CALCULATE_FIXED_VS_ADJUSTABLE_RATE = "CalculateFixedVsAdjustableRate"
    # Spelled as the service publishes it.
    CALCULATE_INTEREST_ONLY_VS_TRADITIONAL = "CalculateInterstOnlyVsTraditional"
    CALCULATE_HELOC = "CalculateHELOC"


VALID_METHODS: frozenset[str] = frozenset(method.value for method in ZillowMethod)


def validate_method(name: str | ZillowMethod) -> str:
    """Return the operation name, or raise InvalidMethodError if it is not allowed."""
    if isinstance(name, ZillowMethod):
        return name.value
    if name not in VALID_METHODS:
        raise InvalidMethodError(name)
    return name
