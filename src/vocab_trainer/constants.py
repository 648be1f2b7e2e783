"""
Application constants.

Fixed values shared by the client components. They are not configurable
because the vocab store and the views agree on them.
"""

# List view
VOCAB_PAGE_SIZE = 10
SEARCH_DEBOUNCE_MS = 300

# Add view
SIMILAR_VOCAB_TAKE = 5
SIMILAR_VOCAB_DEBOUNCE_MS = 500

# Notifications
NOTIFICATION_LIFETIME_MS = 3000
NOTHING_TO_PRACTICE = "nothing to practice"

# Routes
HOME_PATH = "/"
