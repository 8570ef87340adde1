"""Application layer.

Services orchestrating domain entities through protocols.
"""
