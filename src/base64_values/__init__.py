"""
base64_values：标准Base64与URL安全Base64的不可变值类型

    >>> from base64_values import EncodedBase64
    >>> EncodedBase64.from_string("Hello world").url_encoded.text
    'SGVsbG8gd29ybGQ'
"""
from base64_values.models import EncodedBase64, URLEncodedBase64
from base64_values.utils import (
    Base64Codec,
    Base64ValuesError,
    ConfigValidationError,
    CorruptedBase64ValueError,
    InvalidBase64InputError,
)
from base64_values.utils.log_utils import get_logger

__version__ = "0.1.0"

# 作为库被导入时不输出日志，由 setup_logger（CLI）显式开启
get_logger().disable("base64_values")

__all__ = [
    "EncodedBase64",
    "URLEncodedBase64",
    "Base64Codec",
    "Base64ValuesError",
    "InvalidBase64InputError",
    "CorruptedBase64ValueError",
    "ConfigValidationError",
]
