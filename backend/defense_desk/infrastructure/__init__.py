"""Infrastructure Layer: cross-cutting concerns for the imperative shell.

Invariants:
    - Infrastructure never imports from core/ domain logic
"""
