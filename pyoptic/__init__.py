from .kind import Kind, combine, fold
from .errors import OpticError, OpticKindError
from .functions import Func1
from .core import Optic, compose, lens, adapter, prism, affine, traversal, identity
from .chain import Chain, chain, optic
from .ops import get, preview, collect, traverse, update, set
from . import optics

__all__ = [
    'Kind',
    'combine',
    'fold',
    'OpticError',
    'OpticKindError',
    'Func1',
    'Optic',
    'Chain',
    'compose',
    'lens',
    'adapter',
    'prism',
    'affine',
    'traversal',
    'identity',
    'chain',
    'optic',
    'get',
    'preview',
    'collect',
    'traverse',
    'update',
    'set',
    'optics',
]
