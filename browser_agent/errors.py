"""
动作校验异常
"""


class ActionError(ValueError):
    """动作缺少必需字段（url / selector / text / key）"""
