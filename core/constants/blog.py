"""Blog, search and suggestion constants."""

# Blog validation
BLOG_TITLE_MIN_LENGTH = 3
BLOG_TITLE_MAX_LENGTH = 200
BLOG_DESCRIPTION_MIN_LENGTH = 10
BLOG_DESCRIPTION_MAX_LENGTH = 500
EMPTY_EDITOR_HTML = "<p></p>"

# Search
BLOG_NAME_SEARCH_LIMIT = 6
BLOG_SEARCH_LIMIT = 20
USER_SEARCH_MIN_LENGTH = 2
USER_SEARCH_DEFAULT_LIMIT = 10
USER_SEARCH_MAX_LIMIT = 50
SEARCH_DEBOUNCE_SECONDS = 0.3

# Listings
DASHBOARD_LATEST_LIMIT = 6
DASHBOARD_SUGGESTION_LIMIT = 3
PROFILE_BLOG_LIMIT = 10
RELATED_BLOG_LIMIT = 3
RANDOM_SAMPLE_DEFAULT_LIMIT = 4
RANDOM_SAMPLE_MAX_LIMIT = 20
USER_LIST_DEFAULT_LIMIT = 20
USER_LIST_MAX_LIMIT = 100
DASHBOARD_EMPTY_MESSAGE = "No blogs found."

ALL_CATEGORIES = "All"
BLOG_CATEGORIES = [
    ALL_CATEGORIES,
    "Tech",
    "Lifestyle",
    "Travel",
    "Food",
    "Education",
    "Health",
]

# Page cache paths invalidated after mutations
PROFILE_PATH = "/profile"
DASHBOARD_PATH = "/dashboard"
BLOG_PATH = "/blog"
FOLLOW_REVALIDATE_PATHS = (PROFILE_PATH, DASHBOARD_PATH, BLOG_PATH)

# Blog list pagination
BLOG_PAGE_DEFAULT_LIMIT = 10
BLOG_PAGE_MAX_LIMIT = 50
