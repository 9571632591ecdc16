"""Unit tests for BeanMap."""

from unittest.mock import MagicMock

import pytest

from beanwire.application.bean_map import BeanMap
from beanwire.application.scope import Scope
from beanwire.domain import (
    Access,
    Bean,
    DuplicateBeanNameError,
    IMapLoader,
    InvalidBeanDeclarationError,
    InvalidScopeOptionError,
    UnknownBeanError,
)


class TestBeanRegistration:
    """Test cases for BeanMap.bean."""

    def test_bean_returns_new_bean(self):
        """Test that bean() returns the created Bean."""
        bean_map = BeanMap()

        bean = bean_map.bean("foo", klass="Foo")

        assert isinstance(bean, Bean)
        assert bean.name == "foo"
        assert bean.class_name == "Foo"
        assert bean.access == Access.SINGLETON

    def test_bean_is_registered_in_map(self):
        """Test that the created bean is stored under its name."""
        bean_map = BeanMap()

        bean = bean_map.bean("foo", klass="Foo")

        assert bean_map.beans["foo"] is bean
        assert bean_map.get("foo") is bean

    def test_value_bean(self):
        """Test registering a value bean."""
        bean_map = BeanMap()

        bean = bean_map.bean("retries", value=3)

        assert bean.value == 3
        assert bean.class_name is None

    def test_transient_access(self):
        """Test registering a transient bean."""
        bean_map = BeanMap()

        bean = bean_map.bean("mailer", klass="Mailer", access=Access.TRANSIENT)

        assert bean.access == Access.TRANSIENT

    def test_construct_option_passes_through(self):
        """Test that construct reaches the bean."""
        bean_map = BeanMap()

        bean = bean_map.bean("mailer_class", klass="Mailer", construct=False)

        assert bean.instantiate is False

    def test_name_is_normalized_to_string(self):
        """Test that non-string names are stored as strings."""
        bean_map = BeanMap()

        bean_map.bean(42, value="answer")

        assert bean_map.get("42").value == "answer"
        assert bean_map.get(42).value == "answer"

    def test_configure_callback_registers_attributes(self):
        """Test that configure receives the new bean."""
        bean_map = BeanMap()

        bean = bean_map.bean("signup", klass="Signup", configure=lambda b: b.attr("repo", ref="user_repository"))

        assert bean.attributes["repo"].reference == "user_repository"

    def test_duplicate_name_raises(self):
        """Test that a name can only be registered once."""
        bean_map = BeanMap()
        original = bean_map.bean("foo", klass="Foo")

        with pytest.raises(DuplicateBeanNameError) as exc_info:
            bean_map.bean("foo", value=1)

        assert exc_info.value.bean_name == "foo"
        assert bean_map.get("foo") is original

    def test_invalid_declaration_is_not_registered(self):
        """Test that a failed declaration leaves the map untouched."""
        bean_map = BeanMap()

        with pytest.raises(InvalidBeanDeclarationError):
            bean_map.bean("foo")

        assert "foo" not in bean_map

    def test_constructor_configure_callback(self):
        """Test that BeanMap(configure) declares beans on the new map."""
        bean_map = BeanMap(lambda m: m.bean("foo", value=1))

        assert bean_map.get("foo").value == 1


class TestBeanLookup:
    """Test cases for BeanMap.get and container protocol."""

    def test_get_unknown_bean_raises(self):
        """Test that get() on an unknown name raises UnknownBeanError."""
        bean_map = BeanMap()

        with pytest.raises(UnknownBeanError) as exc_info:
            bean_map.get("bar")

        assert exc_info.value.bean_name == "bar"

    def test_contains_len_and_iter(self):
        """Test membership, size and iteration over names."""
        bean_map = BeanMap()
        bean_map.bean("a", value=1)
        bean_map.bean("b", value=2)

        assert "a" in bean_map
        assert "c" not in bean_map
        assert len(bean_map) == 2
        assert list(bean_map) == ["a", "b"]

    def test_beans_returns_a_copy(self):
        """Test that mutating the returned dict does not affect the map."""
        bean_map = BeanMap()
        bean_map.bean("a", value=1)

        beans = bean_map.beans
        beans.clear()

        assert "a" in bean_map


class TestMerge:
    """Test cases for BeanMap.merge."""

    def test_merge_copies_all_beans(self):
        """Test that merge brings every bean of the other map."""
        target = BeanMap()
        target.bean("a", value=1)
        other = BeanMap()
        other.bean("b", value=2)
        other.bean("c", value=3)

        result = target.merge(other)

        assert result is target
        assert set(target) == {"a", "b", "c"}
        assert target.get("b") is other.get("b")

    def test_merge_duplicate_raises_and_leaves_target_unchanged(self):
        """Test that a conflicting merge copies nothing."""
        target = BeanMap()
        target.bean("b", value=1)
        other = BeanMap()
        other.bean("a", value=2)
        other.bean("b", value=3)
        other.bean("c", value=4)

        with pytest.raises(DuplicateBeanNameError) as exc_info:
            target.merge(other)

        assert exc_info.value.bean_name == "b"
        assert list(target) == ["b"]
        assert target.get("b").value == 1

    def test_merge_empty_map(self):
        """Test that merging an empty map is a no-op."""
        target = BeanMap()
        target.bean("a", value=1)

        target.merge(BeanMap())

        assert list(target) == ["a"]


class TestIncludeMap:
    """Test cases for BeanMap.include_map and BeanMap.load."""

    def test_include_map_merges_loaded_map(self):
        """Test that include_map delegates to the loader and merges."""
        loaded = BeanMap()
        loaded.bean("mailer", klass="Mailer")
        loader = MagicMock(spec=IMapLoader)
        loader.load.return_value = loaded
        bean_map = BeanMap(loader=loader)

        bean_map.include_map("config/mailer.py")

        loader.load.assert_called_once_with("config/mailer.py")
        assert "mailer" in bean_map

    def test_include_map_duplicate_raises(self):
        """Test that an included map cannot redeclare a name."""
        loaded = BeanMap()
        loaded.bean("mailer", klass="Mailer")
        loader = MagicMock(spec=IMapLoader)
        loader.load.return_value = loaded
        bean_map = BeanMap(loader=loader)
        bean_map.bean("mailer", value=None)

        with pytest.raises(DuplicateBeanNameError):
            bean_map.include_map("config/mailer.py")

    def test_load_uses_given_loader(self):
        """Test that BeanMap.load returns the loader's result."""
        loaded = BeanMap()
        loader = MagicMock(spec=IMapLoader)
        loader.load.return_value = loaded

        assert BeanMap.load("config/beans.py", loader=loader) is loaded


class TestScopeCreation:
    """Test cases for BeanMap.scope."""

    def test_scope_wraps_map(self):
        """Test that scope() returns a Scope whose parent is the map."""
        bean_map = BeanMap()

        scope = bean_map.scope(prefix="foo")

        assert isinstance(scope, Scope)
        assert scope.parent is bean_map

    def test_scope_runs_configure(self):
        """Test that scope(configure) declares through the scope."""
        bean_map = BeanMap()

        bean_map.scope(lambda s: s.bean("bar", klass="Bar"), prefix="foo")

        assert bean_map.get("foo_bar").class_name == "Bar"

    def test_scope_invalid_option_raises(self):
        """Test that unknown scope options are rejected."""
        with pytest.raises(InvalidScopeOptionError):
            BeanMap().scope(namespace="foo")
