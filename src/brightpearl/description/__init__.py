"""
brightpearl.description

Service description package.

Responsibilities:
- Model operations, parameters and the merged description.
- Load declarative resources and assemble them into one operation registry.
- Hold the process-wide description cache.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The client depends on `cache.description_cache`; builders and loaders are only
# referenced directly by tests and by callers shipping their own resource sets.
