from __future__ import annotations

import pytest

from artifact_writer.config import WriteOptions, WriterConfig, infer_format_kind, load_config
from artifact_writer.formatters import FormatKind


def test_defaults_when_config_missing(tmp_path):
    cfg = load_config(tmp_path / "absent.yaml")

    assert cfg.out_dir == "./"
    assert cfg.options == WriteOptions()
    assert cfg.options.format_kind is FormatKind.JSON
    assert cfg.options.print_width == 80


def test_yaml_values_and_dotted_overrides(tmp_path):
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text("out_dir: build/generated\noptions:\n  format_kind: source\n  print_width: 100\n", encoding="utf-8")

    cfg = load_config(cfg_path, {"options.print_width": 60, "out_dir": None})

    assert cfg.out_dir == "build/generated"
    assert cfg.options.format_kind is FormatKind.SOURCE
    assert cfg.options.print_width == 60
    assert "format_kind" in cfg.options.model_fields_set


def test_unset_format_kind_is_not_marked_as_set(tmp_path):
    cfg = load_config(tmp_path / "absent.yaml", {"options.print_width": 100})

    assert "format_kind" not in cfg.options.model_fields_set


def test_non_mapping_root_rejected(tmp_path):
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ValueError, match="mapping"):
        load_config(cfg_path)


@pytest.mark.parametrize("overrides", [{"options.print_width": 0}, {"options.format_kind": "typescript"}])
def test_invalid_values_rejected(tmp_path, overrides):
    with pytest.raises(ValueError, match="Invalid configuration"):
        load_config(tmp_path / "absent.yaml", overrides)


def test_infer_format_kind():
    assert infer_format_kind("schema.json") is FormatKind.JSON
    assert infer_format_kind("SCHEMA.JSON") is FormatKind.JSON
    assert infer_format_kind("client.py") is FormatKind.SOURCE
    assert infer_format_kind("README") is FormatKind.SOURCE


def test_writer_config_model_default_options_are_independent():
    a = WriterConfig()
    b = WriterConfig()
    assert a.options is not b.options


def test_unknown_keys_rejected(tmp_path):
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text("outdir: build\n", encoding="utf-8")

    with pytest.raises(ValueError, match="outdir"):
        load_config(cfg_path)
