"""五张牌CLI用户界面模块.

这个包提供命令行界面，包括：
- click命令组（compare、deal）
- 渲染器（显示逻辑）
"""

from .render import CLIRenderer
from .main import cli, main

__all__ = ['CLIRenderer', 'cli', 'main']
