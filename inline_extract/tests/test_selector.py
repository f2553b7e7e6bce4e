"""Tests for selector generation and comparison."""

import re
import pytest
from ..core.selector import (
    format_class,
    format_id,
    format_selector,
    generate_hash,
    generate_selector,
    compare_selectors,
)

HASH_SELECTOR = re.compile(r'^\.[a-z][a-z0-9]*$')

class TestFormatting:
    """Tests for selector formatting."""

    def test_format_class(self):
        assert format_class('button') == '.button'
        assert format_class('my-class another-class') == '.my-class.another-class'

    def test_format_class_collapses_whitespace(self):
        assert format_class('  a \t b\n c  ') == '.a.b.c'

    def test_format_class_keeps_existing_dot(self):
        assert format_class('.a b') == '.a.b'

    def test_format_class_empty(self):
        assert format_class('') == ''
        assert format_class('   ') == ''
        assert format_class(None) == ''

    def test_format_id(self):
        assert format_id(' unique-id ') == '#unique-id'
        assert format_id('#already') == '#already'
        assert format_id('') == ''

    def test_format_selector(self):
        assert format_selector('  .parent>.child ') == '.parent > .child'
        assert format_selector('.a ,  .b') == '.a, .b'
        assert format_selector('.a   .b') == '.a .b'

class TestGenerateSelector:
    """Tests for strategy-driven selector generation."""

    def test_class_strategy(self):
        assert generate_selector('test', 'x', 'class') == '.test'

    def test_id_strategy(self):
        assert generate_selector('test', 'x', 'id') == '#x'

    def test_missing_attribute_yields_empty(self):
        assert generate_selector('', '', 'class') == ''
        assert generate_selector('test', '', 'id') == ''

    def test_fallback_prefers_first_strategy(self):
        assert generate_selector('my-class', 'my-id', ['class', 'id']) == '.my-class'

    def test_fallback_uses_next_strategy(self):
        assert generate_selector('', 'my-id', ['class', 'id']) == '#my-id'
        assert generate_selector('my-class', '', ['id', 'class']) == '.my-class'

    def test_fallback_with_nothing_available(self):
        assert generate_selector('', '', ['class', 'id']) == ''

    def test_hash_fallback(self, rng):
        assert HASH_SELECTOR.match(generate_selector('', '', ['class', 'hash'], rng))

    def test_hash_strategy_ignores_attributes(self, rng):
        selector = generate_selector('test', 'x', 'hash', rng)
        assert selector not in ('.test', '#x')
        assert HASH_SELECTOR.match(selector)

    def test_unrecognized_strategy_skipped(self):
        assert generate_selector('a', 'b', ['tag', 'id']) == '#b'
        assert generate_selector('a', 'b', 'tag') == ''

class TestGenerateHash:
    """Tests for random class names."""

    def test_hash_is_valid_selector(self, rng):
        for _ in range(200):
            assert HASH_SELECTOR.match('.' + generate_hash(rng))

    def test_leading_digit_is_regenerated(self, scripted_random):
        assert generate_hash(scripted_random('1abxyz'), length=3) == 'xyz'

    def test_hash_is_deterministic_for_seed(self):
        import random
        assert generate_hash(random.Random(7)) == generate_hash(random.Random(7))

class TestCompareSelectors:
    """Tests for selector equivalence."""

    def test_identical(self):
        assert compare_selectors('.a', '.a')

    def test_class_order_ignored(self):
        assert compare_selectors('.a.b', '.b.a')
        assert compare_selectors('.b.a', '.a.b')

    def test_different_classes(self):
        assert not compare_selectors('.a', '.b')
        assert not compare_selectors('.a.b', '.a')

    def test_class_and_id_differ(self):
        assert not compare_selectors('.a', '#a')

    @pytest.mark.parametrize('selector', ['.a .b', '.a > .b', '.a + .b', '.a ~ .b', '.a, .b', ':not(.a)'])
    def test_combinators_require_exact_match(self, selector):
        assert compare_selectors(selector, selector)

    def test_combinator_order_matters(self):
        assert not compare_selectors('.a .b', '.b .a')
        assert not compare_selectors('.a, .b', '.b, .a')

    def test_combinator_against_simple(self):
        assert not compare_selectors('.a .b', '.a.b')
        assert not compare_selectors('.a.b', '.a .b')
