"""Centralized configuration for the Mortgage Calculator application.

This module contains the business rule constants and display defaults used
by the calculation services and the calculator window.
"""

# =============================================================================
# BUSINESS RULES
# =============================================================================

# Number of monthly payments per loan year
MONTHS_PER_YEAR = 12

# Sanity ceiling for the annual interest rate (percent)
MAX_INTEREST_RATE = 100

# Lowest accepted interest rate (percent); zero means straight-line repayment
MIN_INTEREST_RATE = 0

# =============================================================================
# DISPLAY FORMATS
# =============================================================================

CURRENCY_SYMBOL = "$"

CURRENCY_DECIMALS = 2

# Interest rates are shown as e.g. "6.50%"
RATE_DECIMALS = 2

# =============================================================================
# WINDOW
# =============================================================================

APP_NAME = "Mortgage Calculator"

WINDOW_WIDTH = 900
WINDOW_HEIGHT = 900

# Placeholder text for the input fields
PLACEHOLDER_INTEREST_RATE = "e.g. 6.5"
PLACEHOLDER_LOAN_AMOUNT = "e.g. 300,000"
PLACEHOLDER_LOAN_DURATION = "e.g. 30"
PLACEHOLDER_LOT_FEES = "Optional, e.g. 150"
