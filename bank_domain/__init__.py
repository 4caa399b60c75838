"""
Bank Domain

A small bank account domain object with guarded credit and debit
operations, structured logging and environment-based configuration.
"""

__version__ = "1.0.0"
