from ..kind import Kind
from ..core import Optic
from ..structural import is_same


def non_null() -> Optic:
    def run(f):
        return lambda a: a if a is None else f(a)
    return Optic(Kind.OPTIONAL, run)


def when(test) -> Optic:
    """Keeps the focus only while ``test(focus)`` holds."""
    def run(f):
        def func(a):
            if not test(a):
                return a
            r = f(a)
            return a if is_same(a, r) else r
        return func
    return Optic(Kind.OPTIONAL, run)
