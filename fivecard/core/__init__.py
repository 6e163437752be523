"""
Core Module - 纯领域逻辑层

核心模块只依赖标准库，不依赖CLI展示层。

Modules:
    deck: 扑克牌、花色点数和牌组管理
    eval: 手牌排序、牌型判断和分数计算
    config: 日志和发牌配置
    exceptions: 业务异常定义
"""

__all__ = []
