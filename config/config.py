"""配置文件"""

# 求值参数
CALCULATOR_CONFIG = {
    "default_angle_mode": "radian",  # 与原计算器一致，默认弧度
    "allow_partial": False,  # 剩余多个操作数时报错而不是返回栈底
}

# 会话参数
SESSION_CONFIG = {
    "history_size": 50,  # 历史最多50条，最新在前
    "cache_size": 1000,  # 结果LRU缓存大小
}

# 批量求值参数
BATCH_CONFIG = {
    "expression_column": "expression",
    "default_output_path": "calculator_results.csv",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert CALCULATOR_CONFIG["default_angle_mode"] in ("radian", "degree"), "角度模式只能是 radian/degree"
    assert SESSION_CONFIG["history_size"] == 50, "历史记录上限为50条"
    assert SESSION_CONFIG["cache_size"] > 0, "缓存大小必须为正数"
    assert BATCH_CONFIG["expression_column"], "表达式列名不能为空"
    print("Configuration validated successfully!")
