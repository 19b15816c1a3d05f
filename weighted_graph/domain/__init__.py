"""Domain layer - errors and immutable value types.

Nothing in here depends on the rest of the package.
"""
