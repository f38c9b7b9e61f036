import inspect

from ..kind import Kind
from ..core import Optic
from ..structural import map_filtered, update_at


def _indexed(predicate):
    """Adapts ``predicate(item)`` to the ``predicate(item, index)`` form map_filtered calls."""
    if predicate is None:
        return None
    try:
        params = inspect.signature(predicate).parameters.values()
    except (TypeError, ValueError):
        # builtins without an introspectable signature take the item only
        return lambda item, _: predicate(item)
    positional = [p for p in params if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)]
    if len(positional) >= 2 or any(p.kind == p.VAR_POSITIONAL for p in params):
        return predicate
    return lambda item, _: predicate(item)


def index(idx: int) -> Optic:
    """The single slot ``idx`` of a list or tuple, absent when out of range."""
    def run(f):
        def func(seq):
            return update_at(seq, idx, f)
        return func
    return Optic(Kind.OPTIONAL, run)


def each(predicate=None) -> Optic:
    """Every element of a list or tuple for which ``predicate`` holds.

    The predicate receives the item, plus its index if it takes two arguments.
    """
    test = _indexed(predicate)

    def run(f):
        def func(seq):
            return map_filtered(seq, f, test)
        return func
    return Optic(Kind.TRAVERSAL, run)


_1 = index(0)
_2 = index(1)
