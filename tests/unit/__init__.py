"""
Unit tests for HabitTracker components.

Unit tests run against a fixed clock and an in-memory store; they are fast,
deterministic and need no external services.
"""
