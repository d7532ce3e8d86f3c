# -*- coding: utf-8 -*-

"""Top-level package for quadroot."""

__author__ = """quadroot developers"""
__version__ = "0.1.0"

from .errors import (
    QuadrootError,
    InvalidArguments,
    DomainError,
    DivisionDegenerate,
    DomainWarning,
    DegenerateWarning,
)

from .solver import discriminant, roots, solve, solve_many
