"""
isoenc Utilities

Configuration, logging, environment and console helpers.
"""
