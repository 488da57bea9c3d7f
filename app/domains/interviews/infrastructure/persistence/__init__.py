"""
Interviews persistence adapters
"""
