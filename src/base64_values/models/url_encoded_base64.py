"""URL安全Base64值模型"""
from typing import Iterable, List, Union

from pydantic import Field, RootModel, field_validator

from base64_values.models.encoded_base64 import EncodedBase64, printable_raw_value
from base64_values.utils.codec import Base64Codec
from base64_values.utils.exceptions import InvalidBase64InputError
from base64_values.utils.log_utils import get_logger

logger = get_logger()


def normalize_url_encoded_text(raw_value: str) -> str:
    """
    URL安全Base64的构造规则：
    1. 已是合法的URL安全Base64 -> 原样保留
    2. 否则交给标准Base64的构造规则（合法标准Base64或UTF-8明文），取其URL安全形式
    3. 两者都失败 -> 抛出 InvalidBase64InputError
    :param raw_value: 候选字符串
    :return: 存储用的URL安全Base64文本
    """
    if Base64Codec.is_url_safe(raw_value):
        return raw_value

    logger.debug("输入不是合法的URL安全Base64，交由标准Base64规则处理")
    return EncodedBase64.from_string(raw_value).url_encoded.text


class URLEncodedBase64(RootModel[str]):
    """
    URL安全Base64值（字母表 A-Z a-z 0-9 - _，无填充）
    字节编解码委托给 EncodedBase64，本类只负责字母表转换和自身的合法性校验
    """
    # URL安全Base64文本，构造后保证非空、无填充且补齐后可解码
    root: str = Field(..., description="URL安全Base64文本")

    model_config = {"frozen": True}

    @field_validator("root")
    @classmethod
    def parse_raw_value(cls, v: str) -> str:
        """结构化反序列化入口：失败时以 Invalid raw value 报告原始字符串"""
        try:
            return normalize_url_encoded_text(v)
        except InvalidBase64InputError as e:
            raise ValueError(f"Invalid raw value: {printable_raw_value(v)}") from e

    @classmethod
    def from_string(cls, raw_value: str) -> "URLEncodedBase64":
        """
        从候选字符串构造：URL安全Base64、标准Base64或明文均可接受，无法区分三者
        :param raw_value: 候选字符串
        :return: URLEncodedBase64实例
        """
        return cls.model_construct(normalize_url_encoded_text(raw_value))

    @classmethod
    def from_bytes(cls, data: bytes) -> "URLEncodedBase64":
        """从字节序列构造，空字节序列抛出 InvalidBase64InputError"""
        return cls.from_encoded(EncodedBase64.from_bytes(data))

    @classmethod
    def from_data(cls, data: Union[bytes, bytearray, memoryview, Iterable[int]]) -> "URLEncodedBase64":
        return cls.from_encoded(EncodedBase64.from_data(data))

    @classmethod
    def from_encoded(cls, value: EncodedBase64) -> "URLEncodedBase64":
        """从标准Base64值构造：+ -> -，/ -> _，去掉填充，不会失败"""
        return cls.model_construct(Base64Codec.to_url_safe(value.text))

    @classmethod
    def from_base64_text(cls, base64_text: str) -> "URLEncodedBase64":
        """从标准字母表文本构造，规则同 EncodedBase64.from_string"""
        return cls.from_encoded(EncodedBase64.from_string(base64_text))

    @property
    def text(self) -> str:
        """URL安全Base64文本"""
        return self.root

    @property
    def url_decoded(self) -> EncodedBase64:
        """对应的标准Base64值（每次生成新的实例）"""
        return EncodedBase64.from_url_safe(self)

    @property
    def data(self) -> bytes:
        return self.url_decoded.data

    @property
    def byte_array(self) -> List[int]:
        return self.url_decoded.byte_array

    def __hash__(self) -> int:
        return hash(self.root)

    def __str__(self) -> str:
        return self.root
