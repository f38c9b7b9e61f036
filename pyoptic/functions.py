from __future__ import annotations


def _name_of(func):
    return getattr(func, 'name', None) or getattr(func, '__name__', None) or repr(func)


class Func1:
    """One-argument function that composes right-to-left with ``@``."""

    def __init__(self, func, name: str = None):
        self.func = func
        self.name = name if name is not None else _name_of(func)

    def __call__(self, x):
        return self.func(x)

    def compose(self, g) -> Func1:
        # (f @ g)(x) == f(g(x))
        return Func1(lambda x: self.func(g(x)), f'{self.name} @ {_name_of(g)}')

    def then(self, g) -> Func1:
        return Func1(lambda x: g(self.func(x)), f'{_name_of(g)} @ {self.name}')

    def __matmul__(self, g) -> Func1:
        return self.compose(g)

    def __repr__(self):
        return f'Func1({self.name})'
