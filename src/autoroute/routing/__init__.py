"""Routing — verb classification, slug compilation, ordering, and matching.

Each step is a pure function over its inputs; ``Router`` is the one
stateful piece and only consumes compiled routes.
"""
