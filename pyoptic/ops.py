import logging

from .capture import Everything, First
from .errors import OpticKindError
from .functions import Func1
from .kind import Kind

logger = logging.getLogger(__name__)

_SINGLE = (Kind.ONE,)
_AT_MOST_ONE = (Kind.ONE, Kind.OPTIONAL)


def require_kind(operation, o, accepted):
    if o.kind not in accepted:
        logger.debug('%s() rejected %r', operation, o)
        raise OpticKindError(operation, o.kind, accepted)


def get(o, s):
    """The focus of a One optic."""
    require_kind('get', o, _SINGLE)
    capture = First()
    o.run(capture)(s)
    return capture.result


def preview(o, s, default=None):
    """The focus of a One or Optional optic, or ``default`` when it is absent.

    ``default`` only stands in when no focus was visited. A One optic always
    visits its focus, so a ``None`` it finds (a missing mapping key, say) is
    returned as ``None``.
    """
    require_kind('preview', o, _AT_MOST_ONE)
    capture = First(default)
    o.run(capture)(s)
    return capture.result


def collect(o, s) -> list:
    """Every focus of any optic, in source order."""
    capture = Everything()
    o.run(capture)(s)
    return capture.result


traverse = collect


def update(o, func) -> Func1:
    return o.update(func)


def set(o, s, value):
    return o.run(lambda _: value)(s)
