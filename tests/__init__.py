"""
Test suite for fourspaces

Contains:
- tests/unit/          : Unit tests for individual modules and the full pipeline
"""
