"""
五张牌评估业务异常定义
所有异常都是调用方输入问题，不存在需要重试的瞬时错误
"""


class PokerHandError(Exception):
    """五张牌评估基础异常类"""
    pass


class InvalidCardError(PokerHandError, ValueError):
    """无法解析的扑克牌异常"""
    pass


class HandSizeError(PokerHandError, ValueError):
    """手牌数量不等于5张异常"""
    pass


class DuplicateCardError(PokerHandError, ValueError):
    """手牌中出现重复扑克牌异常"""
    pass


class DeckExhaustedError(PokerHandError, IndexError):
    """牌组已发完异常（可恢复，调用方可停止发牌）"""
    pass


class ConfigError(PokerHandError):
    """配置错误异常"""
    pass
