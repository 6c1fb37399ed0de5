from __future__ import annotations


class SevalError(Exception):
    """ Base class for all seval errors"""
    pass


class LexError(SevalError):
    """ Raised by the tokenizer on a bad character or an unterminated string"""

    def __init__(self, message: str, line: int, column: int):
        super().__init__(f"{message} at line {line}, column {column}")
        self.message = message
        self.line = line
        self.column = column


class ParseError(SevalError):
    """ Raised when source text is not a single well-formed expression"""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        if line is None:
            super().__init__(message)
        else:
            super().__init__(f"{message} at line {line}, column {column}")
        self.message = message
        self.line = line
        self.column = column


class UnclosedListError(ParseError):
    """ Raised when a '(' has no matching ')'"""


class UnclosedStringError(ParseError):
    """ Raised when a string literal has no closing quote"""


class TrailingInputError(ParseError):
    """ Raised when text remains after the first complete expression"""


class UnexpectedEndError(ParseError):
    """ Raised when the input ends where an expression was expected"""


class EmptyAtomError(ParseError):
    """ Raised when a character can start neither a list, a string nor an atom"""


class RecursionLimitError(SevalError):
    """ Raised when evaluation nests deeper than the configured bound"""

    def __init__(self, max_depth: int):
        super().__init__(f"Maximum evaluation depth exceeded ({max_depth})")
        self.max_depth = max_depth


class UnknownOperatorError(SevalError):
    """ Raised when a list head is neither a special form, a closure nor a primitive"""

    def __init__(self, name: str):
        super().__init__(f"Unknown function: {name}")
        self.name = name


class NotCallableError(SevalError):
    """ Raised when apply is given something that is not a closure"""


class NotAFunctionError(SevalError):
    """ Raised when reduce is given something that is not a closure"""


class SevalSyntaxError(SevalError):
    """ Raised when a special form is structurally malformed"""


class SevalArityError(SevalError):
    """ Raised when the number of arguments passed to a form or primitive is incorrect"""


class SevalTypeError(SevalError):
    """ Raised when the types of arguments passed to a form or primitive are incorrect"""


class SevalArithmeticError(SevalError):
    """ Raised on division or modulo by zero"""


class SevalConfigError(SevalError):
    """ Raised when evaluator options are invalid"""
