# --- Site Information ---
AUTHOR = 'Rares Portan'
SITENAME = 'Rares Portan'
SITEURL = 'https://raresportan.com'

# --- Paths ---
PATH = 'content'
ARTICLE_PATHS = ['articles']
PAGE_PATHS = ['pages']
STATIC_PATHS = ['assets', 'extra']

# --- Content Settings ---
TIMEZONE = 'UTC'
DEFAULT_LANG = 'en'
ARTICLE_SAVE_AS = 'blog/{slug}.html'
ARTICLE_URL = 'blog/{slug}.html'
PAGE_SAVE_AS = '{slug}.html'
PAGE_URL = '{slug}.html'
DELETE_OUTPUT_DIRECTORY = True

# --- Feed Settings (disabled for development) ---
FEED_ALL_ATOM = None
CATEGORY_FEED_ATOM = None
TRANSLATION_FEED_ATOM = None
AUTHOR_FEED_ATOM = None
AUTHOR_FEED_RSS = None

# --- Pagination ---
DEFAULT_PAGINATION = 10

# --- Plugins ---
PLUGIN_PATHS = ['pelican-plugins']
# og_image is switched on in publishconf.py only; it needs Chromium and slows
# down `pelican --autoreload`.
PLUGINS = []

# Social cards (og_image plugin)
OG_IMAGE_PATH = 'assets/twitter-cards'
OG_IMAGE_TEMPLATE = 'og-image/og-image.html'
OG_IMAGE_CONTENT_EXTENSION = '.md'
OG_IMAGE_VIEWPORT = (1200, 669)
OG_IMAGE_MISSING_TITLE = 'abort'

# --- Markdown Extensions ---
MARKDOWN = {
    'extensions': [
        'markdown.extensions.codehilite',
        'markdown.extensions.extra',
        'markdown.extensions.meta',
    ],
    'extension_configs': {
        'markdown.extensions.codehilite': {'css_class': 'highlight'},
    },
    'output_format': 'html5',
}

# --- URL Settings ---
RELATIVE_URLS = True

# --- Theme-Specific Settings ---
DISPLAY_PAGES_ON_MENU = True
DISPLAY_CATEGORIES_ON_MENU = False
MENUITEMS = (
    ('Blog', '/archives.html'),
)
