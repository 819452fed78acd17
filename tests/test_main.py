import logging

import pytest
from pydantic import ValidationError

from property_store.kinds import PropertyKind
from property_store.main import build_registry, load_config, setup_logging
from property_store.models import StoreConfig


class TestStoreConfig:
    def test_defaults_seed_four_properties(self):
        config = StoreConfig()

        assert config.store_name == "alfa"
        assert config.log_level == "WARNING"
        assert config.prompt == ">"
        assert config.seed_properties == {
            "str": PropertyKind.TEXT,
            "number": PropertyKind.INT32,
            "very_long": PropertyKind.INT64,
            "dbl": PropertyKind.FLOAT64,
        }

    def test_kind_names_are_case_insensitive(self):
        config = StoreConfig(
            log_level="debug",
            seed_properties={"a": "TEXT", "b": "Int64", "c": "float64"},
        )

        assert config.log_level == "DEBUG"
        assert config.seed_properties["a"] is PropertyKind.TEXT
        assert config.seed_properties["b"] is PropertyKind.INT64
        assert config.seed_properties["c"] is PropertyKind.FLOAT64

    def test_unknown_kind_is_rejected(self):
        with pytest.raises(ValidationError):
            StoreConfig(seed_properties={"a": "decimal"})

    def test_alias_names_are_accepted(self):
        config = StoreConfig(name="beta", properties={"x": "int32"})

        assert config.store_name == "beta"
        assert config.seed_properties == {"x": PropertyKind.INT32}

    def test_null_seed_means_empty(self):
        assert StoreConfig(seed_properties=None).seed_properties == {}


class TestConfigLoading:
    def test_load_valid_config(self, tmp_path):
        config_file = tmp_path / "property_store.yaml"
        config_file.write_text(
            "\n".join(
                [
                    "store_name: gamma",
                    "log_level: info",
                    "prompt: '? '",
                    "seed_properties:",
                    "  host: text",
                    "  port: int32",
                ]
            ),
            encoding="utf-8",
        )

        config = load_config(str(config_file))

        assert config.store_name == "gamma"
        assert config.log_level == "INFO"
        assert config.prompt == "? "
        assert list(config.seed_properties) == ["host", "port"]

    def test_missing_config_falls_back_to_defaults(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            config = load_config(str(tmp_path / "absent.yaml"))

        assert config == StoreConfig()
        assert "not found" in caplog.text

    def test_invalid_config_falls_back_to_defaults(self, tmp_path, caplog):
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("seed_properties:\n  a: decimal\n", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            config = load_config(str(config_file))

        assert config.store_name == "alfa"
        assert "Config load failed" in caplog.text

    def test_empty_file_uses_defaults(self, tmp_path):
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("", encoding="utf-8")

        assert load_config(str(config_file)) == StoreConfig()

    def test_no_path_uses_defaults(self):
        assert load_config(None) == StoreConfig()


class TestBootstrap:
    def test_build_registry_seeds_properties(self):
        registry = build_registry(StoreConfig(store_name="delta", seed_properties={"n": "int32"}))

        assert registry.name == "delta"
        assert registry.names() == ["n"]
        assert registry.get("n").value.kind is PropertyKind.INT32


class TestLogging:
    def test_setup_logging_installs_handlers(self, tmp_path):
        log_file = tmp_path / "store.log"
        root = logging.getLogger()
        saved_handlers = list(root.handlers)
        saved_level = root.level
        try:
            setup_logging(StoreConfig(log_level="debug", log_file=str(log_file)))

            assert root.level == logging.DEBUG
            assert len(root.handlers) == 2
            assert any(isinstance(h, logging.FileHandler) for h in root.handlers)
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
