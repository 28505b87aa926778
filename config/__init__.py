"""
Framework configuration.
"""
