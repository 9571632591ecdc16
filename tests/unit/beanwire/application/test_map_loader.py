"""Unit tests for PythonMapLoader."""

import textwrap

import pytest

from beanwire.application.bean_map import BeanMap
from beanwire.application.map_loader import PythonMapLoader
from beanwire.domain import IMapLoader, MapLoadError


def write_module(directory, name, source):
    path = directory / name
    path.write_text(textwrap.dedent(source))
    return path


class TestLoadFromFile:
    """Test cases for loading declaration files by path."""

    def test_implements_interface(self):
        """Test that PythonMapLoader implements IMapLoader."""
        assert isinstance(PythonMapLoader(), IMapLoader)

    def test_loads_map_from_build_map(self, tmp_path):
        """Test that build_map() is called and its map returned."""
        path = write_module(
            tmp_path,
            "beans.py",
            """
            from beanwire import BeanMap

            def build_map():
                bean_map = BeanMap()
                bean_map.bean("retries", value=3)
                return bean_map
            """,
        )

        bean_map = PythonMapLoader().load(str(path))

        assert isinstance(bean_map, BeanMap)
        assert bean_map.get("retries").value == 3

    def test_custom_factory_name(self, tmp_path):
        """Test that the factory name is configurable."""
        path = write_module(
            tmp_path,
            "beans.py",
            """
            from beanwire import BeanMap

            def mailer_beans():
                return BeanMap(lambda m: m.bean("sender", value="noreply@example.com"))
            """,
        )

        bean_map = PythonMapLoader(factory_name="mailer_beans").load(str(path))

        assert "sender" in bean_map

    def test_each_load_builds_a_fresh_map(self, tmp_path):
        """Test that loading twice evaluates the file twice."""
        path = write_module(
            tmp_path,
            "beans.py",
            """
            from beanwire import BeanMap

            def build_map():
                return BeanMap(lambda m: m.bean("retries", value=3))
            """,
        )
        loader = PythonMapLoader()

        assert loader.load(str(path)) is not loader.load(str(path))

    def test_missing_file_raises(self, tmp_path):
        """Test that a missing file raises MapLoadError."""
        with pytest.raises(MapLoadError) as exc_info:
            PythonMapLoader().load(str(tmp_path / "missing.py"))

        assert exc_info.value.reason == "file does not exist"

    def test_missing_factory_raises(self, tmp_path):
        """Test that a module without build_map raises MapLoadError."""
        path = write_module(tmp_path, "beans.py", "BEANS = {}\n")

        with pytest.raises(MapLoadError, match="build_map"):
            PythonMapLoader().load(str(path))

    def test_factory_returning_wrong_type_raises(self, tmp_path):
        """Test that build_map must return a bean map."""
        path = write_module(tmp_path, "beans.py", "def build_map():\n    return {}\n")

        with pytest.raises(MapLoadError, match="expected a bean map"):
            PythonMapLoader().load(str(path))


class TestLoadFromModule:
    """Test cases for loading importable modules."""

    def test_loads_importable_module(self, tmp_path, monkeypatch):
        """Test that a module name is imported and its factory called."""
        write_module(
            tmp_path,
            "beanwire_test_declarations.py",
            """
            from beanwire import BeanMap

            def build_map():
                return BeanMap(lambda m: m.bean("retries", value=3))
            """,
        )
        monkeypatch.syspath_prepend(str(tmp_path))

        bean_map = PythonMapLoader().load("beanwire_test_declarations")

        assert bean_map.get("retries").value == 3

    def test_unknown_module_raises(self):
        """Test that an unimportable module raises MapLoadError."""
        with pytest.raises(MapLoadError, match="cannot import module"):
            PythonMapLoader().load("no_such_declarations_module")
