from .kind import Kind


class OpticError(Exception):
    pass


class OpticKindError(OpticError, TypeError):
    def __init__(self, operation: str, kind: Kind, accepted):
        self.operation = operation
        self.kind = kind
        self.accepted = tuple(accepted)
        names = ' or '.join(str(k) for k in self.accepted)
        super(OpticKindError, self).__init__(f'{operation}() needs a {names} optic, got {kind}')
