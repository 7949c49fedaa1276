class HullError(Exception):
    pass


class PreconditionViolation(HullError, ValueError):
    pass


class ParseError(HullError, ValueError):

    def __init__(self, message: str, line_number: int = 0):
        self.line_number = line_number
        if line_number:
            message = f'line {line_number}: {message}'
        super().__init__(message)
