"""Tests for the primitive optic constructors and compose."""

import pytest
from hypothesis import given, strategies as st

from pyoptic import (
    Kind, Optic, adapter, affine, collect, compose, get, identity, lens, preview, prism, traversal,
)
from pyoptic.optics import each, field, index, non_null


def test_lens_reads_and_writes():
    first = lens(lambda s: s[0], lambda a, s: (a,) + s[1:])
    assert first.kind is Kind.ONE
    assert get(first, (1, 2)) == 1
    assert first.update(lambda a: a + 5)((1, 2)) == (6, 2)


def test_lens_calls_transform_exactly_once():
    calls = []
    name = lens(lambda s: s['name'], lambda a, s: {**s, 'name': a})

    def f(a):
        calls.append(a)
        return a

    name.update(f)({'name': 'x'})
    assert calls == ['x']


def test_lens_noop_keeps_reference():
    src = {'name': 'x'}
    name = lens(lambda s: s['name'], lambda a, s: {**s, 'name': a})
    assert name.update(lambda a: a)(src) is src


def test_adapter_rebuilds_from_focus():
    celsius = adapter(lambda f: (f - 32) * 5 / 9, lambda c: c * 9 / 5 + 32)
    assert get(celsius, 212) == 100
    assert celsius.update(lambda c: c + 10)(212) == 230


def test_prism_absent_is_noop():
    as_int = prism(lambda s: s if isinstance(s, int) else None, lambda a: a)
    assert as_int.kind is Kind.OPTIONAL
    assert as_int.update(lambda a: a + 1)('text') == 'text'
    assert as_int.update(lambda a: a + 1)(4) == 5
    assert preview(as_int, 'text') is None


def test_affine_zero_or_one_call():
    head = affine(lambda s: s[0] if s else None, lambda a, s: [a] + s[1:])
    calls = []

    def f(a):
        calls.append(a)
        return a * 2

    assert head.update(f)([]) == []
    assert calls == []
    assert head.update(f)([3, 4]) == [6, 4]
    assert calls == [3]


def test_traversal_maps_all():
    items = traversal(lambda s: s['items'], lambda xs, s: {**s, 'items': xs})
    src = {'items': [1, 2, 3], 'tag': 't'}
    assert items.kind is Kind.TRAVERSAL
    assert items.update(lambda n: n * 10)(src) == {'items': [10, 20, 30], 'tag': 't'}
    assert collect(items, src) == [1, 2, 3]


def test_traversal_noop_keeps_reference():
    items = traversal(lambda s: s['items'], lambda xs, s: {**s, 'items': xs})
    src = {'items': [1, 2, 3]}
    assert items.update(lambda n: n)(src) is src


def test_identity():
    assert identity().kind is Kind.ONE
    assert get(identity(), 'x') == 'x'
    assert identity().update(str.upper)('x') == 'X'


def test_compose_kind_and_update():
    o = compose(field('a'), non_null())
    assert o.kind is Kind.OPTIONAL
    assert o.update(lambda v: v + 1)({'a': 1}) == {'a': 2}
    src = {'a': None}
    assert o.update(lambda v: v + 1)(src) is src


def test_rshift_and_compose_method_match():
    a, b = field('a'), field('b')
    src = {'a': {'b': 1}}
    assert (a >> b).update(lambda v: v + 1)(src) == a.compose(b).update(lambda v: v + 1)(src)


def test_compose_rejects_non_optic():
    with pytest.raises(TypeError, match='cannot compose'):
        compose(field('a'), lambda f: f)


def test_sub_optics_are_composed():
    addr = field('addr', _street=field('street'))
    src = {'addr': {'street': 'Elm'}}
    assert get(addr._street, src) == 'Elm'
    assert addr._street.update(str.upper)(src) == {'addr': {'street': 'ELM'}}


def _people(draw_codes):
    return st.lists(
        st.builds(
            lambda name, codes, boss: {'name': name, 'codes': codes, 'boss': boss},
            st.text(max_size=3),
            draw_codes,
            st.one_of(st.none(), st.builds(lambda n: {'name': n}, st.text(max_size=3))),
        ),
        max_size=5,
    )


TRIPLES = [
    (each(), field('codes'), each(lambda n: n > 0), lambda v: v + 1),
    (each(), field('boss'), non_null() >> field('name'), lambda v: v + '!'),
    (index(0), field('boss'), non_null() >> field('name'), lambda v: v + '!'),
    (index(1), field('codes'), index(0), lambda v: v + 1),
]


@pytest.mark.parametrize('a, b, c, bump', TRIPLES)
@given(data=_people(st.lists(st.integers(), max_size=4)))
def test_compose_is_associative(a, b, c, bump, data):
    left = compose(compose(a, b), c)
    right = compose(a, compose(b, c))
    assert left.kind is right.kind
    assert left.update(bump)(data) == right.update(bump)(data)
    assert collect(left, data) == collect(right, data)


@given(data=_people(st.lists(st.integers(), max_size=4)))
def test_identity_update_keeps_reference_for_any_optic(data):
    for a, b, c, _ in TRIPLES:
        o = a >> b >> c
        assert o.update(lambda v: v)(data) is data


def test_optic_is_reusable():
    o = field('n')
    assert o.update(lambda v: v + 1)({'n': 1}) == {'n': 2}
    assert o.update(lambda v: v + 1)({'n': 5}) == {'n': 6}
    assert isinstance(o, Optic)
