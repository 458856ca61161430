"""Domain constants for HomeBank ledgers."""

# Separator between ancestor and child names in a category full name.
CATEGORY_SEPARATOR = "."

# HomeBank stores dates as days since 0000-01-01 (proleptic Gregorian).
# Year 0 is a leap year, so 0001-01-01 sits at offset 366.
FIRST_REPRESENTABLE_OFFSET = 366

# Category flag bits.
CATEGORY_FLAG_INCOME = 1 << 1

# Group flag bit marking an archived group.
GROUP_FLAG_ARCHIVED = 1 << 0

# Budget attribute b0 holds the flat monthly amount, b1..b12 the months.
BUDGET_FLAT_MONTH = 0
BUDGET_MONTHS = range(0, 13)


__all__ = [
    "CATEGORY_SEPARATOR",
    "FIRST_REPRESENTABLE_OFFSET",
    "CATEGORY_FLAG_INCOME",
    "GROUP_FLAG_ARCHIVED",
    "BUDGET_FLAT_MONTH",
    "BUDGET_MONTHS",
]
