"""
Patterns - base classes applications extend: facade, commands, proxies and mediators.
"""
