"""QA warnings - aggregation and display of data-quality warnings."""

__version__ = "0.1.0"
