"""
Service layer for AWS calls made by blocks.

Credential resolution, operation invocation, response serialization and
schema derivation live here so that blocks stay declarative.
"""
