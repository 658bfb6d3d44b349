"""Debugging helpers: pretty printing of expression trees."""
