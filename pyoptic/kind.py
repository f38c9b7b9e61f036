from enum import Enum
from functools import reduce
from typing import Iterable


class Kind(Enum):
    ONE = 'One'
    OPTIONAL = 'Optional'
    TRAVERSAL = 'Traversal'

    def combine(self, inner: 'Kind') -> 'Kind':
        return combine(self, inner)

    def __str__(self):
        return self.value


# outer -> inner -> result
_COMPOSE = {
    Kind.ONE: {
        Kind.ONE: Kind.ONE,
        Kind.OPTIONAL: Kind.OPTIONAL,
        Kind.TRAVERSAL: Kind.TRAVERSAL,
    },
    Kind.OPTIONAL: {
        Kind.ONE: Kind.OPTIONAL,
        Kind.OPTIONAL: Kind.OPTIONAL,
        Kind.TRAVERSAL: Kind.TRAVERSAL,
    },
    Kind.TRAVERSAL: {
        Kind.ONE: Kind.TRAVERSAL,
        Kind.OPTIONAL: Kind.TRAVERSAL,
        Kind.TRAVERSAL: Kind.TRAVERSAL,
    },
}


def combine(outer: Kind, inner: Kind) -> Kind:
    """Kind of ``outer >> inner``: the weaker of the two focus guarantees."""
    return _COMPOSE[outer][inner]


def fold(kinds: Iterable[Kind]) -> Kind:
    return reduce(combine, kinds, Kind.ONE)
