"""Earbud Tracker: in-memory lost & found records for wireless earbuds"""

__version__ = "1.0.0"
