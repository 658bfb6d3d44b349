"""Evaluation of mclisp expressions: dispatch, special forms and application."""
