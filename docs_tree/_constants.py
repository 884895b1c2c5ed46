"""Common literal values used across docs_tree.

These constants keep slug conventions and ordering defaults centralized so the
builder, resolver, and tests agree on the same values.

Examples
--------
>>> from docs_tree import _constants
>>> _constants.INDEX_SEGMENT
'index'
>>> _constants.MISSING_ORDER > 1000
True
"""

INDEX_SEGMENT = "index"
SLUG_SEPARATOR = "/"
MISSING_ORDER = 99999
ROOT_TITLE = "Home"
PLATFORMS_SEGMENT = "platforms"
PLATFORM_TYPE = "platform"
ORDER_KEYS = ("sidebar_order", "order")
