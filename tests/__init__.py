"""
Test suite for the polarization math core

Contains:
- tests/unit/          : Unit tests for core math, contracts, domain models and optics
"""
