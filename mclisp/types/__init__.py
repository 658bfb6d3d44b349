"""Data model for mclisp: expressions, closures, environments and errors."""
