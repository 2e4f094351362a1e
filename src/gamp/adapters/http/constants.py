"""Constants for the Measurement Protocol HTTP transport.

Protocol reference:
https://developers.google.com/analytics/devguides/collection/protocol/v1/reference
"""

# Collection endpoint
COLLECT_URL = "https://www.google-analytics.com/collect"

# Documented payload limits. Exceeding them is logged, not enforced.
MAX_GET_URL_LENGTH = 2000
MAX_POST_BODY_LENGTH = 8192

# The cache buster is a zero-padded random number of this many digits
CACHE_BUSTER_DIGITS = 14

SUPPORTED_HTTP_METHODS = ("GET", "POST")
