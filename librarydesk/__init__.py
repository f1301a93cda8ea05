"""A console front desk for a small library's patrons, catalog and loans."""

__version__ = "0.1.0"