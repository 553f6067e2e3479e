"""
Test suite for hypertiling

Contains:
- tests/unit/          : Unit tests for math, tiling, contracts and rendering
"""
