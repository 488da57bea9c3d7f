"""
Core components: domain primitives, dependency container and application wiring.
"""
