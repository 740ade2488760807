"""
brightpearl.auth

Authentication primitives.

Responsibilities:
- Sign outbound developer/account tokens.
- Validate inbound callback signatures and decode callback payloads.
"""

# Package marker.
