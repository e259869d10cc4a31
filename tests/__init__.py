"""
Test suite for Matrix Toolkit

Contains:
- tests/unit/          : Unit tests for individual modules
                         (включая property-based тесты на hypothesis)
"""
