"""CSV Explorer — load, classify, filter, sort, summarize and chart CSV tables."""
__version__ = "1.0.0"
