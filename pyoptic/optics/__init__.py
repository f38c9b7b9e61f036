from .record import field, derive_optics
from .sequence import index, each, _1, _2
from .refine import non_null, when

__all__ = [
    'field',
    'derive_optics',
    'index',
    'each',
    'non_null',
    'when',
    '_1',
    '_2',
]
