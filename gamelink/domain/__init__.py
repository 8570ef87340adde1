"""Domain layer: entities, enums, errors, protocols and pure helpers.

No infrastructure dependencies; adapters live in `gamelink.infrastructure`.
"""
