"""Base64 编解码工具模块：严格校验、字节编解码、标准/URL安全字母表互转"""
import base64
import re

from base64_values.utils.exceptions import InvalidBase64InputError


class Base64Codec:
    """Base64编解码工具类"""
    PADDING = "="  # 标准Base64填充字符
    URL_SAFE_PATTERN = re.compile(r"[A-Za-z0-9_-]+")  # URL安全字母表（不含填充）

    @staticmethod
    def encode(data: bytes) -> str:
        """
        将字节序列编码为标准Base64（带=填充，长度为4的倍数）
        :param data: 原始字节
        :return: 标准Base64字符串
        """
        return base64.b64encode(data).decode("ascii")

    @staticmethod
    def decode(text: str) -> bytes:
        """
        严格解码标准Base64：不允许空白、换行、字母表外字符，填充必须正确
        :param text: 标准Base64字符串
        :return: 解码后的字节
        """
        # 不补齐、不修复：长度必须已经是4的倍数
        if len(text) % 4 != 0:
            raise InvalidBase64InputError(f"Base64长度必须是4的倍数，当前为：{len(text)}")
        try:
            return base64.b64decode(text, validate=True)
        except ValueError as e:
            # binascii.Error 以及非ASCII字符串都是 ValueError
            raise InvalidBase64InputError(f"非法的Base64字符串：{e}") from e

    @staticmethod
    def is_valid(text: str) -> bool:
        """判断字符串是否为可严格解码的非空标准Base64"""
        if not text:
            return False
        try:
            Base64Codec.decode(text)
        except InvalidBase64InputError:
            return False
        return True

    @staticmethod
    def to_url_safe(text: str) -> str:
        """
        标准Base64 -> URL安全Base64：+ 替换为 -，/ 替换为 _，去掉尾部的=填充
        :param text: 标准Base64字符串
        :return: URL安全Base64字符串
        """
        return text.replace("+", "-").replace("/", "_").rstrip(Base64Codec.PADDING)

    @staticmethod
    def to_standard(text: str) -> str:
        """
        URL安全Base64 -> 标准Base64：- 替换为 +，_ 替换为 /，补=直到长度为4的倍数
        :param text: URL安全Base64字符串
        :return: 标准Base64字符串
        """
        value = text.replace("-", "+").replace("_", "/")
        return value + Base64Codec.PADDING * (-len(value) % 4)

    @staticmethod
    def is_url_safe(text: str) -> bool:
        """
        判断字符串是否为合法的URL安全Base64
        非空、只包含 A-Z a-z 0-9 - _，且补齐填充后可按标准字母表解码
        """
        if not text:
            return False
        if Base64Codec.URL_SAFE_PATTERN.fullmatch(text) is None:
            return False
        return Base64Codec.is_valid(Base64Codec.to_standard(text))
