class SchemeError(Exception):
    """ Base class for all minischeme errors"""
    pass

class SchemeSyntaxError(SchemeError):
    """ Raised when the token stream or a special form has the wrong shape"""

class SchemeLexError(SchemeSyntaxError):
    """ Raised when the tokenizer meets a character it does not recognize"""

class SchemeNameError(SchemeError):
    """ Raised when a variable is used or set before it is defined"""

class SchemeRuntimeError(SchemeError):
    """ Raised when evaluation fails on well-formed input"""

class SchemeArityError(SchemeRuntimeError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

class SchemeTypeError(SchemeRuntimeError):
    """ Raised when the types of arguments passed to a procedure are incorrect"""

class SchemeRecursionError(SchemeError):
    """ Raised when evaluation exhausts the host stack"""
