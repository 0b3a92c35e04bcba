"""Building blocks for a warrior combat simulator: statistics, hit tables, rage, timing and damage bookkeeping."""

__version__ = "0.1.0"