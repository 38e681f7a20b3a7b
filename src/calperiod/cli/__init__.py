"""Command line interface for calperiod."""
