"""
Domain Constants

Key prefixes and limits shared by the auth and post flows.
"""

# Key-value store prefixes
FORGET_PASSWORD_PREFIX = "forget-password:"
SESSION_PREFIX = "sess:"

# Largest page the posts listing will return
MAX_POSTS_PAGE_SIZE = 50

# Length of Post.text_snippet
TEXT_SNIPPET_LENGTH = 50
