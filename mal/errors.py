from __future__ import annotations

from typing import Any


class MalError(Exception):
    """ Base class for all mal errors"""
    pass


class MalSyntaxError(MalError):
    """ Raised when source text cannot be read into a form.

    `partial` holds whatever structure the reader had built when it gave up.
    """

    def __init__(self, message: str, partial: Any = None):
        super().__init__(message)
        self.partial = partial


class MalEOFError(MalSyntaxError):
    """ Raised when input ends inside an open collection or string"""


class MalUnboundSymbol(MalError):
    """ Raised when a symbol is looked up before it is bound"""

    def __init__(self, symbol: Any):
        super().__init__(f"'{symbol}' not found")
        self.symbol = symbol


class MalInvalidSymbol(MalError):
    """ Raised when something other than a symbol is used as a binding name"""


class MalTypeError(MalError):
    """ Raised when a value of the wrong kind is used"""


class MalArityError(MalError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class MalZeroDivisionError(MalError):
    """ Raised on integer division by zero"""
