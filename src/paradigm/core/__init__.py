"""Core containers and typeclass interfaces."""

from paradigm.core.option import Option, Some, Nothing, NOTHING
from paradigm.core.either import Either, Left, Right
from paradigm.core.task import Task
from paradigm.core.task_either import TaskEither
from paradigm.core.monoid import Monoid
from paradigm.core.typeclasses import Functor, Applicative, Monad
from paradigm.core.errors import ParadigmError, EmptyContainerError, MonoidLawError

__all__ = [
    "Option",
    "Some",
    "Nothing",
    "NOTHING",
    "Either",
    "Left",
    "Right",
    "Task",
    "TaskEither",
    "Monoid",
    "Functor",
    "Applicative",
    "Monad",
    "ParadigmError",
    "EmptyContainerError",
    "MonoidLawError",
]
