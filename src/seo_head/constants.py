"""Constants and default values used across the application."""

# Product identity (shown by the debug markers)
PRODUCT_NAME = "seo-head"
PRODUCT_URL = "https://github.com/orgoj/seo-head"

# Head output format
HEAD_INDENT = "\t"  # One indentation unit before every presenter line
HEAD_LINE_BREAK = "\n"

# Host actions
PAGE_HEAD_ACTION = "page_head"  # Fired by the host while printing <head>
AMP_HEAD_ACTION = "amp_head"  # Fired by the host for AMP templates
HEAD_ACTION = "seo_head"  # Fired by us, presenters and third parties listen here
TITLE_FILTER = "page_title"  # Applied by the host to the text of its own <title> tag

# Action priorities
PAGE_HEAD_PRIORITY = 1
AMP_HEAD_PRIORITY = 9
TITLE_FILTER_PRIORITY = 15
PRESENT_HEAD_PRIORITY = -9999  # Run before any third-party head listener
DEFAULT_ACTION_PRIORITY = 10

# Site option keys read at selection time
OPTION_OPENGRAPH = "opengraph"
OPTION_TWITTER = "twitter"
OPTION_FORCE_REWRITE_TITLE = "forcerewritetitle"

# Presentation defaults
DEFAULT_SEPARATOR = "-"
DEFAULT_TITLE_TEMPLATE = "%%title%% %%sep%% %%sitename%%"
DEFAULT_OG_LOCALE = "en_US"
DEFAULT_TWITTER_CARD_TYPE = "summary_large_image"
DEFAULT_ROBOTS = ("index", "follow")
NOINDEX_ROBOTS = ("noindex", "follow")

# Schema output
SCHEMA_CONTEXT = "https://schema.org"
