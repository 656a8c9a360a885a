"""自定义异常类"""


class Base64ValuesError(Exception):
    """base64_values 所有异常的基类"""
    pass


class InvalidBase64InputError(Base64ValuesError):
    """构造Base64值时输入非法异常（空字符串、空字节序列、无法编码的字符串）"""
    pass


class CorruptedBase64ValueError(Base64ValuesError, AssertionError):
    """已校验的Base64值无法解码（构造期不变量被破坏，属于程序错误）"""
    pass


class ConfigValidationError(Base64ValuesError):
    """配置验证失败异常"""
    pass
