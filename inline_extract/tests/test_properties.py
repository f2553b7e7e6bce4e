"""Tests for style declaration handling."""

from ..core.properties import format_prop, format_props, merge_props

class TestFormatProps:
    """Tests for style attribute parsing."""

    def test_basic(self):
        assert format_props('color: red; margin: 10px;') == ['color: red', 'margin: 10px']

    def test_normalizes_spacing(self):
        assert format_props('margin:10px;color :  red') == ['color: red', 'margin: 10px']

    def test_sorted(self):
        assert format_props('z-index: 1; color: red; background: none') == [
            'background: none', 'color: red', 'z-index: 1'
        ]

    def test_splits_on_first_colon(self):
        assert format_props('background: url(http://example.com/a.png)') == [
            'background: url(http://example.com/a.png)'
        ]

    def test_malformed_fragments_preserved(self):
        assert format_props('color: red; ; margin;') == ['color: red', 'margin']

    def test_empty(self):
        assert format_props('') == []
        assert format_props('   ') == []
        assert format_props(' ; ;') == []
        assert format_props(None) == []

    def test_exact_duplicates_removed(self):
        assert format_props('color: red; color:red') == ['color: red']

    def test_same_name_different_values_kept(self):
        assert format_props('color: red; color: blue') == ['color: blue', 'color: red']

    def test_format_prop(self):
        assert format_prop(' font-size : 14px ') == 'font-size: 14px'
        assert format_prop(' bare ') == 'bare'

class TestMergeProps:
    """Tests for property merging."""

    def test_union_sorted(self):
        assert merge_props(['color: red'], ['font-size: 16px', 'color: red']) == [
            'color: red', 'font-size: 16px'
        ]

    def test_merge_with_self(self):
        props = ['a: 1', 'b: 2']
        assert merge_props(props, props) == props

    def test_does_not_mutate_inputs(self):
        props = ['b: 2']
        merge_props(props, ['a: 1'])
        assert props == ['b: 2']

    def test_order_independent(self):
        assert merge_props(['b: 2'], ['a: 1']) == merge_props(['a: 1'], ['b: 2'])
