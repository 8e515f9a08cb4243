"""Test package for the Gemini chat widget and relay.

Structure:
    - unit/: Protocol, configuration, attachment, client and controller tests
    - integration/: Relay endpoint and widget-through-relay workflows

The generative API is always faked with httpx.MockTransport; no test makes
a real outbound call. Leverages pytest with pytest-check for soft assertions.
"""
