"""Test suite for timeslicr.

Test Structure:
- unit/: Unit tests for individual components
  - timeline/: interval model, edits, reorder, store
  - interaction/: range drag controller
  - export/: text summary and copying
  - config/: config models and loaders
  - utils/: utility function tests
  - cli/: command-line entry point
- conftest.py: Shared fixtures (stores, demo timeline, configs)
"""
