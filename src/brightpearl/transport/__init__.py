"""
brightpearl.transport

HTTP boundary.

Responsibilities:
- Shape operation calls into transport-neutral request values.
- Execute them and decode responses, surfacing failures as `TransportError`.
"""

# Package marker.
