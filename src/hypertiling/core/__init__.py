"""
Core math primitives, domain models, and contracts.

This module contains the foundational building blocks that are independent
of any drawing surface or embedding application.
"""
