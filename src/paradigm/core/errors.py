"""Exceptions raised on API contract violations.

Absence and failure are modelled as values (``Nothing`` and ``Left``) and are
never raised. The exceptions below signal misuse of the API instead: pulling a
value out of an empty container without a default, or handing the reducers a
monoid that does not obey its laws.
"""

__all__ = [
    "ParadigmError",
    "EmptyContainerError",
    "MonoidLawError",
]


class ParadigmError(Exception):
    """Base class for all errors raised by Paradigm."""


class EmptyContainerError(ParadigmError):
    """A value was extracted from a container that does not hold one."""


class MonoidLawError(ParadigmError):
    """A monoid instance violated the identity or associativity law.

    Attributes:
        law: Name of the violated law ("left identity", "right identity" or
            "associativity").
        operands: The sample values that exposed the violation.
    """

    def __init__(self, law: str, operands: tuple):
        self.law = law
        self.operands = operands
        super().__init__(f"Monoid violates {law} law for operands {operands!r}")
