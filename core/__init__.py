"""
Core actors - the per-key Model, View and Controller and their registry.
"""
