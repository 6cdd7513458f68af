"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks: immutable value
types, the differentiation protocol, numerical sign tests and JSON
contracts.
"""
