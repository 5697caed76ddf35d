"""
Pytest fixtures for fqcn_stripper tests.

Fixtures are organized by test category:
- stripper.py: NameStripper instances and input samples
"""
