"""Functional primitives for Paradigm.

This package provides the pipeable, curried combinators used to compose the
core containers: one module per container (``option``, ``either``, ``task``,
``task_either``) plus ``array`` for ordered sequences, ``apply`` for
positional combination, ``monoid`` for reduction and ``function`` for
``pipe``/``flow``. Every function is stateless and side-effect-free; the only
effects are the ones inside tasks the caller builds and runs.
"""
