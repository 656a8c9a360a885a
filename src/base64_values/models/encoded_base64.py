"""标准Base64值模型"""
from typing import TYPE_CHECKING, Iterable, List, Union

from pydantic import Field, RootModel, field_validator

from base64_values.utils.codec import Base64Codec
from base64_values.utils.exceptions import CorruptedBase64ValueError, InvalidBase64InputError
from base64_values.utils.log_utils import get_logger

if TYPE_CHECKING:
    from base64_values.models.url_encoded_base64 import URLEncodedBase64

logger = get_logger()


def printable_raw_value(raw_value: str) -> str:
    """错误信息用：孤立代理字符转义为 \\udxxx，保证可按UTF-8编码"""
    return raw_value.encode("utf-8", "backslashreplace").decode("utf-8")


def normalize_base64_text(raw_value: str) -> str:
    """
    标准Base64的构造规则（双重解释，顺序不可调换）：
    1. 空字符串 -> 抛出 InvalidBase64InputError
    2. 已是合法的标准Base64 -> 原样保留，不修复、不补齐、不去除空白
    3. 否则视为明文，按UTF-8编码后存储其标准Base64编码
    4. 无法按UTF-8编码（如孤立代理字符） -> 抛出 InvalidBase64InputError

    注意：含空白或换行的Base64（如 "SGVsbG8gd29y bGQ="）不合法，会走第3步被重新编码，而不是报错
    :param raw_value: 候选字符串
    :return: 存储用的标准Base64文本
    """
    if not raw_value:
        raise InvalidBase64InputError("Base64输入不能为空字符串")

    if Base64Codec.is_valid(raw_value):
        return raw_value

    try:
        plaintext = raw_value.encode("utf-8")
    except UnicodeEncodeError as e:
        logger.debug(f"输入既不是合法Base64，也无法按UTF-8编码（长度：{len(raw_value)}）")
        raise InvalidBase64InputError(f"输入既不是合法Base64，也无法按UTF-8编码：{raw_value!r}") from e

    logger.debug(f"输入不是合法的标准Base64，按UTF-8明文重新编码（长度：{len(raw_value)}）")
    return Base64Codec.encode(plaintext)


class EncodedBase64(RootModel[str]):
    """
    标准Base64值（字母表 A-Z a-z 0-9 + /，=填充）
    不可变，按text做结构化比较与哈希，可作为dict键或set元素

    构造方式：
        EncodedBase64.from_string("Hello world")   # 明文 -> "SGVsbG8gd29ybGQ="
        EncodedBase64.from_bytes(b"Hello world")
        EncodedBase64.from_url_safe(url_value)
        EncodedBase64("SGVsbG8gd29ybGQ=")          # 经pydantic校验，规则同from_string
    """
    # 标准Base64文本，构造后保证非空且可解码
    root: str = Field(..., description="标准Base64文本")

    model_config = {"frozen": True}

    @field_validator("root")
    @classmethod
    def parse_raw_value(cls, v: str) -> str:
        """结构化反序列化入口：失败时以 Invalid raw value 报告原始字符串"""
        try:
            return normalize_base64_text(v)
        except InvalidBase64InputError as e:
            raise ValueError(f"Invalid raw value: {printable_raw_value(v)}") from e

    @classmethod
    def from_string(cls, raw_value: str) -> "EncodedBase64":
        """
        从候选字符串构造（合法Base64原样保留，否则按UTF-8明文编码）
        :param raw_value: 候选字符串
        :return: EncodedBase64实例
        """
        return cls.model_construct(normalize_base64_text(raw_value))

    @classmethod
    def from_bytes(cls, data: bytes) -> "EncodedBase64":
        """
        从字节序列构造
        :param data: 原始字节，不能为空
        :return: EncodedBase64实例
        """
        if not data:
            raise InvalidBase64InputError("字节序列不能为空")
        return cls.model_construct(Base64Codec.encode(bytes(data)))

    @classmethod
    def from_data(cls, data: Union[bytes, bytearray, memoryview, Iterable[int]]) -> "EncodedBase64":
        """从类字节对象（bytearray、memoryview、整数序列）构造，先转换为bytes"""
        if isinstance(data, (int, str)):
            raise TypeError(f"不支持的字节数据类型：{type(data).__name__}")
        return cls.from_bytes(bytes(data))

    @classmethod
    def from_url_safe(cls, url_value: "URLEncodedBase64") -> "EncodedBase64":
        """从URL安全Base64值构造：还原字母表并补齐填充，不会失败"""
        return cls.model_construct(Base64Codec.to_standard(url_value.text))

    @property
    def text(self) -> str:
        """标准Base64文本"""
        return self.root

    @property
    def data(self) -> bytes:
        """解码后的字节；构造时已校验，解码失败说明不变量被破坏"""
        try:
            return Base64Codec.decode(self.root)
        except InvalidBase64InputError as e:
            logger.critical(f"已校验的Base64值无法解码：{self.root!r}")
            raise CorruptedBase64ValueError(f"已校验的Base64值无法解码：{self.root!r}") from e

    @property
    def byte_array(self) -> List[int]:
        return list(self.data)

    @property
    def url_encoded(self) -> "URLEncodedBase64":
        """对应的URL安全Base64值（每次生成新的实例）"""
        from base64_values.models.url_encoded_base64 import URLEncodedBase64

        return URLEncodedBase64.from_encoded(self)

    def __hash__(self) -> int:
        return hash(self.root)

    def __str__(self) -> str:
        return self.root
