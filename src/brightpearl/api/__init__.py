"""
brightpearl.api

Callback receiver (FastAPI).

Responsibilities:
- Accept Brightpearl app-install and ongoing callbacks over HTTP.
- Authenticate them with the developer secret before any payload is trusted.
"""

# Package marker.
