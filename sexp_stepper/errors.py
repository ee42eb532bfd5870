

class StepperError(Exception):
    """ Base class for all stepper errors"""
    pass

class StepperUndefinedSymbol(StepperError):
    """ Raised when a symbol that is not a builtin name is stepped"""
    pass

class StepperInvalidOperator(StepperError):
    """ Raised when an application's operator is neither a lambda nor a builtin"""

class StepperInvalidLambda(StepperError):
    """ Raised when a lambda is applied but its parameter list or body is malformed"""

class StepperTypeError(StepperError):
    """ Raised when a builtin receives an operand of the wrong kind"""

class StepperSyntaxError(StepperError):
    """ Raised when source text cannot be read into a term"""

class StepperHistoryError(StepperError):
    """ Raised when a session is moved outside the states it has recorded"""
