"""工具模块导出"""
from base64_values.utils.codec import Base64Codec
from base64_values.utils.exceptions import (
    Base64ValuesError,
    ConfigValidationError,
    CorruptedBase64ValueError,
    InvalidBase64InputError,
)

__all__ = [
    "Base64Codec",
    "Base64ValuesError",
    "InvalidBase64InputError",
    "CorruptedBase64ValueError",
    "ConfigValidationError",
]
