"""Tests for ContextVar-based builder configuration.

Validates defaults, thread isolation, context manager behavior, and that
builders copy the active config at construction.
"""

from threading import Thread

import pytest

from xmlbuilder import (
    Builder,
    BuilderConfig,
    builder_config_context,
    get_builder_config,
    reset_builder_config,
    set_builder_config,
)


class TestBuilderConfigDataclass:
    """Test BuilderConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = BuilderConfig()
        assert config.indent == "  "
        assert config.pretty is True
        assert config.offset == 0
        assert config.self_closing is True
        assert config.escape_apostrophe is False

    def test_immutability(self) -> None:
        config = BuilderConfig()
        with pytest.raises(AttributeError):
            config.pretty = False  # type: ignore[misc]

    def test_custom_values(self) -> None:
        config = BuilderConfig(indent="\t", offset=-1)
        assert config.indent == "\t"
        assert config.offset == -1
        assert config.pretty is True  # Still default


class TestBuilderConfigFromDict:
    """Test BuilderConfig.from_dict() factory method."""

    def test_from_dict_basic(self) -> None:
        config = BuilderConfig.from_dict({"indent": "    ", "self_closing": False})
        assert config.indent == "    "
        assert config.self_closing is False
        assert config.pretty is True

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = BuilderConfig.from_dict({"pretty": False, "unknown_key": "ignored"})
        assert config.pretty is False

    def test_from_dict_empty(self) -> None:
        assert BuilderConfig.from_dict({}) == BuilderConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        reset_builder_config()

    def test_default_config(self) -> None:
        assert get_builder_config() == BuilderConfig()

    def test_set_and_reset(self) -> None:
        custom = BuilderConfig(pretty=False)
        set_builder_config(custom)
        assert get_builder_config() is custom
        reset_builder_config()
        assert get_builder_config() == BuilderConfig()

    def test_context_manager_restores(self) -> None:
        outer = BuilderConfig(indent="\t")
        set_builder_config(outer)
        with builder_config_context(BuilderConfig(pretty=False)):
            assert get_builder_config().pretty is False
        assert get_builder_config() is outer

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError), builder_config_context(BuilderConfig(offset=4)):
            raise RuntimeError("boom")
        assert get_builder_config().offset == 0


class TestBuilderUsesConfig:
    """Builders read the active config once, at construction."""

    def test_builder_picks_up_context_config(self) -> None:
        with builder_config_context(BuilderConfig(pretty=False)):
            b = Builder()
        b.element("a").tag("b").end()
        assert str(b.sink) == "<a><b /></a>"

    def test_explicit_config_wins(self) -> None:
        with builder_config_context(BuilderConfig(pretty=False)):
            b = Builder(config=BuilderConfig(indent="\t"))
        b.element("a").tag("b").end()
        assert str(b.sink) == "<a>\n\t<b />\n</a>\n"

    def test_builder_setters_leave_config_alone(self) -> None:
        b = Builder()
        b.pretty(False).indent("\t")
        assert get_builder_config() == BuilderConfig()

    def test_offset_from_config(self) -> None:
        b = Builder(config=BuilderConfig(offset=1))
        b.tag("x")
        assert str(b.sink) == "  <x />\n"


class TestThreadIsolation:
    """Config set in one thread is invisible to others."""

    def test_thread_sees_default(self) -> None:
        seen: list[BuilderConfig] = []

        def worker() -> None:
            seen.append(get_builder_config())

        with builder_config_context(BuilderConfig(pretty=False)):
            t = Thread(target=worker)
            t.start()
            t.join()

        assert seen == [BuilderConfig()]

    def test_concurrent_builders_independent(self) -> None:
        results: dict[int, str] = {}

        def worker(i: int) -> None:
            with builder_config_context(BuilderConfig(pretty=bool(i % 2))):
                b = Builder()
                for _ in range(50):
                    b.element("row", "i", i).tag("cell", i).end()
                results[i] = str(b.sink)

        threads = [Thread(target=worker, args=(i,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        for i, text in results.items():
            row = f'<row i="{i}">\n  <cell>{i}</cell>\n</row>\n' if i % 2 else f'<row i="{i}"><cell>{i}</cell></row>'
            assert text == row * 50
