class ExpressionError(Exception):
    """Base class for every failure of the parse -> table -> DNF pipeline."""


class LexError(ExpressionError):
    def __init__(self, char, position=None):
        self.char = char
        self.position = position
        super().__init__(f"unknown token {char}")


class ParseError(ExpressionError):
    def __init__(self, message, token=None):
        self.token = token
        super().__init__(message)


class TooManyVariablesError(ExpressionError):
    def __init__(self, count, limit):
        self.count = count
        self.limit = limit
        super().__init__(f"{count} variables exceed the truth table limit of {limit}")
