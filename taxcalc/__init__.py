"""Tax Calc - salary tax and take-home pay calculator."""

__version__ = "0.1.0"
