"""Domain layer: roles, permissions, actors, audit events and policies.

Pure Python with no infrastructure imports.
"""
