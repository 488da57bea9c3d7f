"""
Interviews Infrastructure Layer

Persistence, LINE messaging and scheduling adapters.
"""
