"""
Fluent path builder.

A ``Chain`` is an optic that knows how to extend itself one step at a time::

    street = chain().prop('addr').opt().prop('street')
    preview(street, person)
    street.update(str.upper)(person)

Each step composes a primitive optic after the current one and wraps the
result in a new ``Chain``; the receiver is left as it was.
"""
from __future__ import annotations

from typing import Callable, Optional

from .core import Optic, compose, identity
from .optics.record import field
from .optics.refine import non_null, when
from .optics.sequence import each, index


class Chain(Optic):
    @classmethod
    def wrap(cls, optic: Optic) -> Chain:
        if isinstance(optic, cls):
            return optic
        wrapped = cls(optic.kind, optic.run)
        # sub-optics are already composed with optic, carry them as they are
        wrapped.__dict__.update({k: v for k, v in optic.__dict__.items() if k not in ('kind', 'run')})
        return wrapped

    def compose(self, other: Optic) -> Chain:
        return Chain.wrap(compose(self, other))

    def __rshift__(self, other: Optic) -> Chain:
        return self.compose(other)

    def prop(self, name) -> Chain:
        return self.compose(field(name))

    def at(self, idx: int) -> Chain:
        return self.compose(index(idx))

    def opt(self) -> Chain:
        return self.compose(non_null())

    def filter(self, predicate: Optional[Callable] = None) -> Chain:
        return self.compose(each(predicate))

    def collect(self, predicate: Optional[Callable] = None) -> Chain:
        return self.filter(predicate)

    def guard(self, test: Callable) -> Chain:
        return self.compose(when(test))


def chain(base: Optional[Optic] = None) -> Chain:
    if base is None:
        return Chain.wrap(identity())
    return Chain.wrap(base)


optic = chain
