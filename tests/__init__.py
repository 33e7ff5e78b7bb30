"""
Test package for the HabitTracker application.

Test Organization:
    unit/: Unit tests for models, store, projections and services
    conftest.py: Pytest configuration and shared fixtures
"""
