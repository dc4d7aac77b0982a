"""
Exception types for geometric fitting.

Malformed arguments (wrong dimension, zero direction vectors) are reported
with the built-in ``ValueError``/``TypeError``. The classes below describe
input that is well-formed but has no unique answer.
"""


class DegenerateCaseError(ValueError):
    """
    The input does not determine a unique, well-conditioned result.

    Raised for too few points, coincident points, equally strong principal
    directions, collinear points, an empty line set or a singular
    intersection system. The message names which of these occurred.

    This is a subclass of ``ValueError``. Callers that treat ``ValueError``
    as a usage bug should catch ``DegenerateCaseError`` in an earlier
    ``except`` clause.
    """


class SingularMatrixError(DegenerateCaseError):
    """A linear system could not be solved because its matrix is singular."""
