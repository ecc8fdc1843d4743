"""Scope keys used by the live subscription registry"""

# Scope key for listeners that follow every user's new tags
ALL_USERS_SCOPE = "ALL"
