"""值模型导出"""
from base64_values.models.encoded_base64 import EncodedBase64
from base64_values.models.url_encoded_base64 import URLEncodedBase64

__all__ = [
    "EncodedBase64",
    "URLEncodedBase64",
]
