"""Graph primitives for the one-digit edit graph.

This package provides the bounds-checked ``Matrix`` type, the edge predicate
(``edit``), the graph builder (``builder``) and NetworkX views of the result
(``convert``).
"""
