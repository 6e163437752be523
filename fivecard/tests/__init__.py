"""
Tests Module - 测试框架

Test Categories:
    unit/: 单元测试 - 测试单个模块功能
    property/: 性质测试 - 验证分数和排序的数学性质
    integration/: 集成测试 - 测试牌组、评估器和CLI的协作
    anti_cheat/: 反作弊系统 - 确保测试使用真实的核心对象
"""
