"""
Core Tests

Tests for the building state machine:
- Command validity for every door/floor state
- Reset on illegal commands and engine failures
- Rider capacity and door-open delivery
"""
