#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HopeBridge - 主启动脚本
未安装包时直接从源码目录运行 CLI
"""

import sys
from pathlib import Path

# 添加 src 到 Python 路径
src_dir = Path(__file__).parent.absolute() / "src"
sys.path.insert(0, str(src_dir))

from hopebridge.presentation.cli.main import run_cli  # noqa: E402


if __name__ == "__main__":
    sys.exit(run_cli())
