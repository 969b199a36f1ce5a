"""
Tests for path-based retrieval.
"""

import pytest

from microconfig import PathResolver, get, lazy

pytestmark = pytest.mark.unit


class TestGet:
    """Test get() against nested configuration trees."""

    def setup_method(self):
        self.tree = {
            'a': {'b': {'c': 3, 'list': [1, 2]}},
            'name': 'app',
            'empty': None,
            'dotted.key': 'value',
        }

    def test_top_level_key(self):
        assert get(self.tree, 'name') == 'app'

    def test_dotted_path_matches_manual_descent(self):
        assert get(self.tree, 'a.b.c') == self.tree['a']['b']['c']

    def test_sequence_path(self):
        assert get(self.tree, ['a', 'b', 'c']) == 3
        assert get(self.tree, ('a', 'b')) == {'c': 3, 'list': [1, 2]}

    def test_unknown_key_returns_none(self):
        assert get(self.tree, 'missing') is None
        assert get(self.tree, 'a.missing.c') is None

    def test_path_through_scalar_returns_none(self):
        assert get(self.tree, 'name.length') is None
        assert get(self.tree, 'a.b.c.d') is None
        assert get(self.tree, 'a.b.list.0') is None

    def test_explicit_none_value(self):
        assert get(self.tree, 'empty') is None

    def test_custom_delimiter(self):
        assert get(self.tree, 'dotted.key', delimiter='/') == 'value'
        assert get(self.tree, 'a/b/c', delimiter='/') == 3

    def test_empty_sequence_returns_none(self):
        assert get(self.tree, []) is None

    def test_non_mapping_tree_returns_none(self):
        assert get(None, 'a') is None
        assert get(['a'], 'a') is None

    def test_tree_is_not_modified(self):
        before = {'a': {'b': {'c': 3, 'list': [1, 2]}}, 'name': 'app', 'empty': None, 'dotted.key': 'value'}
        get(self.tree, 'a.b.c')

        assert self.tree == before


class TestLazyResolution:
    """Test LazyValue unwrapping at the end of a path."""

    def test_lazy_value_is_unwrapped(self):
        assert get({'x': lazy(lambda: 42)}, 'x') == 42

    def test_nested_lazy_value_is_unwrapped(self):
        tree = {'db': {'url': lazy(lambda: 'postgres://localhost')}}

        assert get(tree, 'db.url') == 'postgres://localhost'

    def test_producer_reruns_on_every_get(self, counter):
        tree = {'x': lazy(counter)}

        assert get(tree, 'x') == 42
        assert get(tree, 'x') == 42
        assert counter.calls == 2

    def test_only_one_level_is_unwrapped(self):
        inner = lazy(lambda: 'inner')
        tree = {'x': lazy(lambda: inner)}

        assert get(tree, 'x') is inner

    def test_lazy_value_in_the_middle_of_a_path_is_not_descended(self):
        tree = {'x': lazy(lambda: {'y': 1})}

        assert get(tree, 'x.y') is None


class TestPathResolver:

    def test_split(self):
        resolver = PathResolver(':')

        assert resolver.split('a:b') == ['a', 'b']
        assert resolver.split(('a', 'b')) == ['a', 'b']

    def test_empty_delimiter_is_rejected(self):
        with pytest.raises(ValueError):
            PathResolver('')

    def test_get(self):
        assert PathResolver('|').get({'a': {'b': 1}}, 'a|b') == 1
