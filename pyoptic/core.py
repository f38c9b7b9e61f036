from __future__ import annotations

from typing import Callable

from .functions import Func1
from .kind import Kind, combine
from . import ops
from .structural import is_same, map_filtered


class Optic:
    def __init__(self, kind: Kind, run, **sub_optics):
        # run: (a -> a) -> (s -> s)
        self.kind = kind
        self.run = run
        self.__dict__.update({k: self >> v for k, v in sub_optics.items()})

    def view(self) -> Func1:
        ops.require_kind('view', self, (Kind.ONE,))
        return Func1(lambda s: ops.get(self, s), 'view')

    def update(self, func) -> Func1:
        return Func1(self.run(func), 'update')

    def set(self, v) -> Func1:
        return Func1(self.run(lambda _: v), 'set')

    def compose(self, other: Optic) -> Optic:
        return compose(self, other)

    def __rshift__(self, other: Optic) -> Optic:
        return compose(self, other)

    def __repr__(self):
        return f'{self.__class__.__name__}({self.kind})'


def compose(outer: Optic, inner: Optic) -> Optic:
    if not isinstance(outer, Optic) or not isinstance(inner, Optic):
        raise TypeError(f'cannot compose {type(outer).__name__} with {type(inner).__name__}')
    outer_run, inner_run = outer.run, inner.run
    return Optic(combine(outer.kind, inner.kind), lambda f: outer_run(inner_run(f)))


def _run_one(get, set):
    def run(f):
        def func(s):
            a = get(s)
            r = f(a)
            return s if is_same(a, r) else set(r, s)
        return func
    return run


def _run_optional(get, set):
    def run(f):
        def func(s):
            a = get(s)
            if a is None:
                return s
            r = f(a)
            return s if is_same(a, r) else set(r, s)
        return func
    return run


def lens(get: Callable, set: Callable) -> Optic:
    """Exactly one focus. ``set(a, s)`` returns ``s`` with the focus replaced."""
    return Optic(Kind.ONE, _run_one(get, set))


def adapter(get: Callable, set: Callable) -> Optic:
    """Exactly one focus. ``set(a)`` rebuilds the whole source from the focus."""
    return Optic(Kind.ONE, _run_one(get, lambda a, _: set(a)))


def prism(get: Callable, set: Callable) -> Optic:
    """Zero or one focus; ``get`` returns None when absent. ``set(a)`` rebuilds the source."""
    return Optic(Kind.OPTIONAL, _run_optional(get, lambda a, _: set(a)))


def affine(get: Callable, set: Callable) -> Optic:
    """Zero or one focus; ``get`` returns None when absent. ``set(a, s)`` patches the source."""
    return Optic(Kind.OPTIONAL, _run_optional(get, set))


def traversal(get: Callable, set: Callable) -> Optic:
    """Zero or more foci. ``get(s)`` returns a sequence, ``set(seq, s)`` writes it back."""
    def run(f):
        def func(s):
            items = list(get(s))
            result = map_filtered(items, f)
            return s if result is items else set(result, s)
        return func
    return Optic(Kind.TRAVERSAL, run)


def identity() -> Optic:
    return Optic(Kind.ONE, lambda f: lambda s: f(s))
