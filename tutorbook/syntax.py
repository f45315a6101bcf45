"""
Command syntax: the prefix literals that label fields in command text.
"""

PREFIX_NAME = "n/"
PREFIX_PHONE = "p/"
PREFIX_EMAIL = "e/"
PREFIX_ADDRESS = "a/"
PREFIX_SUBJECT = "s/"
PREFIX_REMARK = "r/"
PREFIX_NEXT_LESSON = "l/"

# D/M/YYYY HHMM-HHMM, e.g. 15/4/2025 0900-1100
LESSON_PATTERN = r"([0-9]{1,2})/([0-9]{1,2})/([0-9]{4})\s([0-9]{4})-([0-9]{4})"
