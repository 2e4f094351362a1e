"""Measurement Protocol v1 parameter keys.

Reference: https://developers.google.com/analytics/devguides/collection/protocol/v1/parameters
"""

PROTOCOL_VERSION = "1"

# General
PARAM_PROTOCOL_VERSION = "v"
PARAM_TRACKING_ID = "tid"
PARAM_CLIENT_ID = "cid"
PARAM_ANON_IP = "aip"
PARAM_QUEUE_TIME = "qt"
PARAM_CACHE_BUSTER = "z"
PARAM_SESSION_CONTROL = "sc"
PARAM_HIT_TYPE = "t"
PARAM_NON_INTERACTIVE_HIT = "ni"

# Traffic sources
PARAM_DOCUMENT_REFERRER = "dr"
PARAM_CAMPAIGN_NAME = "cn"
PARAM_CAMPAIGN_SOURCE = "cs"
PARAM_CAMPAIGN_MEDIUM = "cm"
PARAM_CAMPAIGN_KEYWORD = "ck"
PARAM_CAMPAIGN_CONTENT = "cc"
PARAM_CAMPAIGN_ID = "ci"
PARAM_GOOGLE_ADWORDS_ID = "gclid"
PARAM_GOOGLE_DISPLAYADS_ID = "dclid"

# System info
PARAM_SCREEN_RESOLUTION = "sr"
PARAM_VIEWPORT_SIZE = "vs"
PARAM_DOCUMENT_ENCODING = "de"
PARAM_SCREEN_COLORS = "sd"
PARAM_USER_LANGUAGE = "ul"
PARAM_JAVA_ENABLED = "je"
PARAM_FLASH_VERSION = "fl"

# Content information
PARAM_DOC_LOCATION = "dl"
PARAM_DOC_HOST = "dh"
PARAM_DOC_PATH = "dp"
PARAM_DOC_TITLE = "dt"
PARAM_CONTENT_DESC = "cd"

# App tracking
PARAM_APP_NAME = "an"
PARAM_APP_VERSION = "av"

# Event tracking
PARAM_EVENT_CATEGORY = "ec"
PARAM_EVENT_ACTION = "ea"
PARAM_EVENT_LABEL = "el"
PARAM_EVENT_VALUE = "ev"

# E-commerce
PARAM_TRANS_ID = "ti"
PARAM_TRANS_AFFILIATION = "ta"
PARAM_TRANS_REVENUE = "tr"
PARAM_TRANS_SHIPPING = "ts"
PARAM_TRANS_TAX = "tt"
PARAM_ITEM_NAME = "in"
PARAM_ITEM_PRICE = "ip"
PARAM_ITEM_QUANTITY = "iq"
PARAM_ITEM_CODE = "ic"
PARAM_ITEM_CATEGORY = "iv"
PARAM_CURRENCY_CODE = "cu"

# Social interactions
PARAM_SOCIAL_NETWORK = "sn"
PARAM_SOCIAL_ACTION = "sa"
PARAM_SOCIAL_ACTION_TARGET = "st"

# User timing
PARAM_USER_TIMING_CATEGORY = "utc"
PARAM_USER_TIMING_VARIABLE = "utv"
PARAM_USER_TIMING_TIME = "utt"
PARAM_USER_TIMING_LABEL = "utl"

# Page timing
PARAM_PAGE_LOAD_TIME = "plt"
PARAM_DNS_TIME = "dns"
PARAM_DOWNLOAD_TIME = "pdt"
PARAM_REDIRECT_RESPONSE_TIME = "rrt"
PARAM_TCP_CONNECT_TIME = "tcp"
PARAM_SERVER_RESPONSE_TIME = "srt"

# Exceptions
PARAM_EXCEPTION_DESC = "exd"
PARAM_EXCEPTION_IS_FATAL = "exf"

# Hit type values sent under PARAM_HIT_TYPE
HIT_TYPE_EVENT = "event"
HIT_TYPE_PAGEVIEW = "pageview"
HIT_TYPE_TRANSACTION = "transaction"
HIT_TYPE_ITEM = "item"
HIT_TYPE_SOCIAL = "social"
HIT_TYPE_TIMING = "timing"
HIT_TYPE_EXCEPTION = "exception"

# Custom dimension / metric keys: cd1, cd2, ... / cm1, cm2, ...
DIMENSION_KEY_PATTERN = r"cd[1-9][0-9]*"
METRIC_KEY_PATTERN = r"cm[1-9][0-9]*"
