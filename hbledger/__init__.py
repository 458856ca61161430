"""HomeBank ledger query toolkit."""

__version__ = "0.1.0"
