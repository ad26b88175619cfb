"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks that every function
family of the library is built on.
"""
