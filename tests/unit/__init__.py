"""Unit tests for individual components in isolation.

Coverage:
    - exchange/: configuration, attachments, request building, reply parsing
    - exchange client: upstream status handling against a fake API
    - ui/: exchange controller state transitions and relay client

Uses fakes for the view and the backend. Leverages pytest-check for
multiple assertions per test.
"""
