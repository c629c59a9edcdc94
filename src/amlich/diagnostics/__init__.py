"""Diagnostics package.

Light-weight checks and printouts over the bundled year table. Only
`leap_months` needs the optional plotting extras.
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "table_check", "leap_months"]
