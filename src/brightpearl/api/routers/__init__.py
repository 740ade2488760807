"""
brightpearl.api.routers

Router modules for the callback receiver.
"""

# Package marker.
