"""
五张牌评估模块.

提供Hand、HandEvaluator和相关类型，实现牌型识别、分数计算和手牌比较功能.
"""

from .types import HandCategory, HandResult, ShowdownOutcome
from .hand import Hand, HAND_SIZE
from .evaluator import HandEvaluator, SCORE_BASE

__all__ = [
    'HandCategory', 'HandResult', 'ShowdownOutcome',
    'Hand', 'HAND_SIZE', 'HandEvaluator', 'SCORE_BASE'
]
