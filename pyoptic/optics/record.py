import logging
from dataclasses import fields, is_dataclass
from typing import *

from ..kind import Kind
from ..core import Optic
from ..structural import update_field

logger = logging.getLogger(__name__)


def field(field_name, **sub_optics) -> Optic:
    def run(f):
        def func(obj):
            return update_field(obj, field_name, f)
        return func
    return Optic(Kind.ONE, run, **sub_optics)


def derive_optics(cls):
    assert is_dataclass(cls), f'{cls!r} is not a dataclass'

    def get_optics(cls) -> Dict[str, Optic]:
        try:
            hints = get_type_hints(cls)
        except (NameError, TypeError):
            # unresolvable or unsupported annotations, fall back to the raw annotations
            hints = {}

        def build_optic(f) -> Optic:
            tp = hints.get(f.name, f.type)
            if is_dataclass(tp):
                return field(f.name, **get_optics(tp))
            return field(f.name)

        return {f'_{f.name}': build_optic(f) for f in fields(cls)}

    optics = get_optics(cls)

    for k, v in optics.items():
        setattr(cls, k, v)

    logger.debug('derived %d optics for %s', len(optics), cls.__qualname__)
    return cls
