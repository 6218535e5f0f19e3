"""bidsort — load eBid records from CSV and sort them by title."""

__version__ = "0.1.0"
