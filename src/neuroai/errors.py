"""
NeuroAI Errors Module

This module defines the errors surfaced to callers by the network model
and by the population machinery. Both derive from IndexError, since both
signal an attempt to read past the end of a vector or a collection.

Classes:
    ShapeMismatchError:   An input vector does not fit the layer it is fed to
    EmptyCollectionError: More items were requested than a collection holds
"""

class ShapeMismatchError(IndexError):
    """
    Raised when a vector fed to a network (or to one of its layers) does not
    have the length the network expects, or when a node references a position
    outside the vector it reads from.
    """
    pass

class EmptyCollectionError(IndexError):
    """
    Raised when popping from an empty PriorityRanking, or when selecting
    more networks from a Generation than it contains.
    """
    pass
