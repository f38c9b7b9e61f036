"""
Copy-on-write helpers for records and sequences.

Every helper hands back the container it was given when the transform
leaves the focused value unchanged, so untouched branches of a tree keep
their identity after an update.
"""
import copy
import math
from collections.abc import Mapping
from dataclasses import is_dataclass, replace

_SCALARS = (int, float, complex, bool, str, bytes, type(None))


def is_same(old, new) -> bool:
    if new is old:
        return True
    # scalars have no stable identity, compare them by value
    if type(new) is not type(old) or not isinstance(new, _SCALARS) or new != old:
        return False
    # 0.0 == -0.0, but setting one over the other is still a change
    if isinstance(new, float):
        return math.copysign(1.0, new) == math.copysign(1.0, old)
    if isinstance(new, complex):
        return is_same(new.real, old.real) and is_same(new.imag, old.imag)
    return True


def _is_namedtuple(obj) -> bool:
    return isinstance(obj, tuple) and hasattr(obj, '_replace') and hasattr(obj, '_fields')


def _is_sequence(obj) -> bool:
    return isinstance(obj, (list, tuple))


def _rebuild(sequence, items):
    """A copy of ``sequence`` holding ``items``, keeping list and tuple subclasses."""
    if isinstance(sequence, tuple):
        if _is_namedtuple(sequence):
            return type(sequence)._make(items)
        return tuple(items) if type(sequence) is tuple else type(sequence)(items)
    result = copy.copy(sequence)
    result[:] = items
    return result


def read_field(container, key):
    if isinstance(container, Mapping):
        return container.get(key)
    return getattr(container, key)


def _with_field(container, key, value):
    if isinstance(container, Mapping):
        new_obj = copy.copy(container)
        new_obj[key] = value
        return new_obj
    if is_dataclass(container) and not isinstance(container, type):
        return replace(container, **{key: value})
    if _is_namedtuple(container):
        return container._replace(**{key: value})
    new_obj = copy.copy(container)
    setattr(new_obj, key, value)
    return new_obj


def update_field(container, key, transform):
    old = read_field(container, key)
    new = transform(old)
    if is_same(old, new):
        return container
    return _with_field(container, key, new)


def update_at(sequence, index: int, transform):
    if not _is_sequence(sequence) or index < 0 or index >= len(sequence):
        return sequence

    old = sequence[index]
    new = transform(old)
    if is_same(old, new):
        return sequence

    items = list(sequence)
    items[index] = new
    return _rebuild(sequence, items)


def map_filtered(sequence, transform, predicate=None):
    if not _is_sequence(sequence):
        return sequence

    changed = 0
    result = []
    for i, item in enumerate(sequence):
        if predicate is not None and not predicate(item, i):
            result.append(item)
            continue
        r = transform(item)
        if not is_same(item, r):
            changed += 1
        result.append(r)

    if changed == 0:
        return sequence
    return _rebuild(sequence, result)
