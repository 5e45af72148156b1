"""Stock pricing and weighted-average-cost ledger."""

__version__ = "1.0.0"
