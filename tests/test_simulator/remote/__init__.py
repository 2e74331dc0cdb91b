"""
Remote Engine Tests

Tests for the HTTP engine:
- Polling and command parsing
- Transport error latch
- Error classification
"""
