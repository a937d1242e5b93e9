"""Diagnostics package.

- diagnostics: always available, light-weight checks (no ephemeris)
- diagnostics.ephem: optional (requires ephemeris extras)
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "leap_years", "nowruz_scatter"]
