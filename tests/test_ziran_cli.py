#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for the ziran-sort command line entry point.
"""

import io
import logging
import sys
from unittest.mock import patch

import pytest

from ziran_compare.cli_setup import setup_logging
from ziran_compare.compare_options import CompareOptions
from ziran_compare.config_loader import ConfigLoader
from ziran_compare.config_schema import DEFAULT_CONFIG_TEMPLATE
from ziran_compare.ziran_cli import main, sort_lines


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every CLI test where no ziran_config.yml exists"""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def titles_file(tmp_path):
    path = tmp_path / "titles.txt"
    path.write_text("第十章\n第2章\n\n第一章\n第十章\n", encoding="utf-8")
    return path


class TestSortLines:
    """Test sort_lines."""

    def test_natural_order(self):
        assert sort_lines(["文件10", "文件2", "文件1"], CompareOptions()) == ["文件1", "文件2", "文件10"]

    def test_skip_empty(self):
        assert sort_lines(["b", "", "   ", "a"], CompareOptions()) == ["a", "b"]

    def test_keep_empty(self):
        assert sort_lines(["b", "", "a"], CompareOptions(), skip_empty=False) == ["", "a", "b"]

    def test_strip(self):
        assert sort_lines(["  第二章 ", "第一章"], CompareOptions(), strip=True) == ["第一章", "第二章"]

    def test_unique_and_reverse(self):
        lines = ["第一章", "第二章", "第一章"]
        assert sort_lines(lines, CompareOptions(), reverse=True, unique=True) == ["第二章", "第一章"]

    def test_order_equal_lines_are_kept_by_unique(self):
        assert sort_lines(["第十章", "第10章"], CompareOptions(), unique=True) == ["第十章", "第10章"]


class TestMain:
    """Test main() end to end."""

    def test_compare(self, capsys):
        main(["--compare", "第九章", "第十章"])
        assert capsys.readouterr().out == "-1\n"

    def test_compare_equal(self, capsys):
        main(["--compare", "第十章", "第10章"])
        assert capsys.readouterr().out == "0\n"

    def test_compare_with_policy(self, capsys):
        main(["--compare", "一", "1", "--chinese-number-policy", "last"])
        assert capsys.readouterr().out == "1\n"

    def test_sort_file(self, titles_file, capsys):
        main([str(titles_file)])
        assert capsys.readouterr().out == "第一章\n第2章\n第十章\n第十章\n"

    def test_sort_file_options(self, titles_file, capsys):
        main([str(titles_file), "--reverse", "--unique", "--keep-empty"])
        assert capsys.readouterr().out == "第十章\n第2章\n第一章\n\n"

    def test_sort_multiple_files(self, tmp_path, capsys):
        (tmp_path / "a.txt").write_text("文件10\n", encoding="utf-8")
        (tmp_path / "b.txt").write_text("文件九\n", encoding="utf-8")
        main([str(tmp_path / "a.txt"), str(tmp_path / "b.txt"), "--encoding", "utf-8"])
        assert capsys.readouterr().out == "文件九\n文件10\n"

    def test_explicit_encoding(self, tmp_path, capsys):
        path = tmp_path / "gb.txt"
        path.write_bytes("第十章\n第九章\n".encode("gb18030"))
        main([str(path), "--encoding", "gb18030"])
        assert capsys.readouterr().out == "第九章\n第十章\n"

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO("第二章\n第一章\n".encode("utf-8"))))
        main(["-", "--encoding", "utf-8"])
        assert capsys.readouterr().out == "第一章\n第二章\n"

    def test_brackets_are_not_markup(self, tmp_path, capsys):
        path = tmp_path / "tags.txt"
        path.write_text("[b]2\n[b]1\n", encoding="utf-8")
        main([str(path), "--encoding", "utf-8"])
        assert capsys.readouterr().out == "[b]1\n[b]2\n"

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "missing.txt")])
        assert exc_info.value.code == 1
        assert "Cannot read" in capsys.readouterr().err

    def test_config_file_is_applied(self, tmp_path, titles_file, capsys):
        config = tmp_path / "custom.yml"
        config.write_text("sorting:\n  reverse: true\n  unique: true\n", encoding="utf-8")
        main([str(titles_file), "--config", str(config)])
        assert capsys.readouterr().out == "第十章\n第2章\n第一章\n"

    def test_invalid_config_exits(self, tmp_path, titles_file, capsys):
        config = tmp_path / "bad.yml"
        config.write_text("compare:\n  number_string_policy: sideways\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main([str(titles_file), "--config", str(config)])
        assert exc_info.value.code == 1
        assert "sideways" in capsys.readouterr().err

    def test_snake_case_config_policy(self, tmp_path, capsys):
        config = tmp_path / "snake.yml"
        config.write_text("compare:\n  number_string_policy: string_first\n", encoding="utf-8")
        main(["--compare", "a", "1", "--config", str(config)])
        assert capsys.readouterr().out == "-1\n"

    def test_validation_error_printed_once(self, tmp_path, titles_file, capsys):
        config = tmp_path / "bad.yml"
        config.write_text("compare:\n  chinese_number_policy: sometimes\n", encoding="utf-8")
        with patch("ziran_compare.cli_setup.safe_print") as setup_print:
            with pytest.raises(SystemExit):
                main([str(titles_file), "--config", str(config)])
        assert "line 2:" in capsys.readouterr().err
        printed = " ".join(str(call.args) for call in setup_print.call_args_list)
        assert "sometimes" not in printed
        assert "Please fix the configuration file" in printed

    def test_no_reverse_overrides_config(self, tmp_path, titles_file, capsys):
        config = tmp_path / "custom.yml"
        config.write_text("sorting:\n  reverse: true\n", encoding="utf-8")
        main([str(titles_file), "--config", str(config), "--no-reverse", "--unique"])
        assert capsys.readouterr().out == "第一章\n第2章\n第十章\n"

    def test_init_config(self, tmp_path, capsys):
        main(["--init-config"])
        config_path = tmp_path / "ziran_config.yml"
        assert config_path.exists()
        assert config_path.read_text(encoding="utf-8") == DEFAULT_CONFIG_TEMPLATE
        assert "Default configuration written" in capsys.readouterr().err

        main(["--init-config"])
        assert "already exists" in capsys.readouterr().err


class TestSetupLogging:
    """Test setup_logging."""

    def test_file_logging(self, tmp_path):
        log_path = tmp_path / "ziran.log"
        config = ConfigLoader(tmp_path / "missing.yml").get_default_config()
        config["logging"].update({"file_enabled": True, "file_path": str(log_path), "level": "INFO"})

        logger = setup_logging(config)
        try:
            assert logger.level == logging.INFO
            logger.info("sorted 3 lines")
            for handler in logger.handlers:
                handler.flush()
            assert "sorted 3 lines" in log_path.read_text(encoding="utf-8")
        finally:
            for handler in list(logger.handlers):
                if isinstance(handler, logging.FileHandler):
                    logger.removeHandler(handler)
                    handler.close()

    def test_verbose_forces_debug(self, tmp_path):
        config = ConfigLoader(tmp_path / "missing.yml").get_default_config()
        assert setup_logging(config, verbose=True).level == logging.DEBUG
