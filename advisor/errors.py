"""Errors raised while producing an advisory.

The message of every AdvisoryError is shown to the user as-is.
"""


class AdvisoryError(Exception):
    pass


class GeocodeError(AdvisoryError):
    """Postcode lookup failed or returned no usable location."""


class ForecastError(AdvisoryError):
    """Forecast provider failed or returned no daily temperatures."""


GENERIC_ERROR_MESSAGE = "An error occurred"
