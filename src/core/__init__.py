"""
Core math primitives, domain models, and serialization contracts.

This module contains the foundational building blocks that are independent
of rendering, persistence, and network layers.
"""
