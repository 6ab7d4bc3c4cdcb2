#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest configuration and shared fixtures for all tests
"""

import os
import sys
from pathlib import Path

import pytest

# Add src directory to path so we can import our modules
src_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
sys.path.insert(0, src_dir)

from ziran_compare.compare_options import CompareOptions  # noqa: E402


@pytest.fixture
def default_options():
    """Default comparison options"""
    return CompareOptions()


@pytest.fixture
def chapter_titles():
    """Chapter titles in mixed notations, shuffled"""
    return ["第十章", "第2章", "第一章", "第十一章", "第九章", "第10章", "序章"]


@pytest.fixture
def sample_strings():
    """Strings used for the ordering property checks"""
    return [
        "",
        "一",
        "1",
        "十",
        "一十",
        "10",
        "a",
        "A",
        "abc",
        "a1",
        "1a",
        "千",
        "千千",
        "0",
        "零",
        "一二三",
        "123",
        "文件",
        "文件a",
        "文件1",
        "文件2",
        "文件10",
        "文件九",
        "文件a文件b",
        "文件1文件b",
        "第九章",
        "第十章",
        "第9章第10节",
        "贰拾叁",
        "二十三",
        "版本2点0点3",
        "北京",
        "上海",
    ]


@pytest.fixture
def write_config(tmp_path):
    """Write a YAML configuration file and return its path"""

    def _write(content: str) -> Path:
        config_file = tmp_path / "ziran_config.yml"
        config_file.write_text(content, encoding="utf-8")
        return config_file

    return _write
