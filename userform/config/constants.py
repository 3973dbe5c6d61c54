"""
Shared constants used across the form.

Centralizes the fixed option lists and format bounds that the field
registry and the validators both refer to.
"""

# Phone number must be exactly this many digits
PHONE_DIGITS = 10

# Radio / select options
GENDER_CHOICES = ("Male", "Female")
COUNTRY_CHOICES = ("India", "United States", "United Kingdom", "Canada")

# Date inputs submit ISO calendar dates
DATE_FORMAT_HINT = "YYYY-MM-DD"

# Checkbox values the terminal surface treats as "checked"
CHECKED_VALUES = ("true", "on", "1", "yes", "y")

TERMS_MESSAGE = "You must agree to the terms and conditions"
