"""EncodedBase64 标准Base64值测试"""

from __future__ import annotations

import base64

import pytest
from pydantic import ValidationError

from base64_values import CorruptedBase64ValueError, EncodedBase64, InvalidBase64InputError, URLEncodedBase64


def test_valid_base64_is_stored_verbatim() -> None:
    """合法Base64原样保留"""
    value = EncodedBase64.from_string("SGVsbG8gd29ybGQ=")

    assert value.text == "SGVsbG8gd29ybGQ="


def test_plaintext_is_encoded() -> None:
    """非Base64字符串按UTF-8明文编码"""
    value = EncodedBase64.from_string("Hello world")

    assert value.text == "SGVsbG8gd29ybGQ="
    assert value.data == b"Hello world"


def test_whitespace_in_base64_falls_back_to_plaintext_encoding() -> None:
    """含空白的Base64不被修复，而是按明文重新编码"""
    raw_value = "SGVsbG8gd29y bGQ="

    value = EncodedBase64.from_string(raw_value)

    assert value.text == base64.b64encode(raw_value.encode("utf-8")).decode("ascii")
    assert value.data == raw_value.encode("utf-8")


def test_unpadded_base64_is_treated_as_plaintext() -> None:
    """缺少填充不会被补齐"""
    value = EncodedBase64.from_string("SGVsbG8gd29ybGQ")

    assert value.text != "SGVsbG8gd29ybGQ="
    assert value.data == b"SGVsbG8gd29ybGQ"


def test_empty_string_is_rejected() -> None:
    with pytest.raises(InvalidBase64InputError):
        EncodedBase64.from_string("")


def test_non_utf8_string_is_rejected() -> None:
    """无法按UTF-8编码的字符串（孤立代理字符）构造失败"""
    with pytest.raises(InvalidBase64InputError):
        EncodedBase64.from_string("\ud800")


def test_from_bytes_encodes_with_padding() -> None:
    value = EncodedBase64.from_bytes("Hello world".encode("utf-8"))

    assert value.text == "SGVsbG8gd29ybGQ="
    assert value.byte_array == list(b"Hello world")


def test_empty_bytes_are_rejected() -> None:
    with pytest.raises(InvalidBase64InputError):
        EncodedBase64.from_bytes(b"")
    with pytest.raises(InvalidBase64InputError):
        EncodedBase64.from_data(bytearray())


def test_from_data_accepts_bytes_like_sources() -> None:
    """bytearray、memoryview、整数列表与bytes结果一致"""
    expected = EncodedBase64.from_bytes(b"Hello world")

    assert EncodedBase64.from_data(bytearray(b"Hello world")) == expected
    assert EncodedBase64.from_data(memoryview(b"Hello world")) == expected
    assert EncodedBase64.from_data(list(b"Hello world")) == expected


def test_from_data_rejects_int() -> None:
    with pytest.raises(TypeError):
        EncodedBase64.from_data(5)


@pytest.mark.parametrize("data", [b"\x00", b"ab", b"\xfb\xff\xbf", bytes(range(256))])
def test_bytes_round_trip(data: bytes) -> None:
    assert EncodedBase64.from_bytes(data).data == data


def test_url_encoded_view() -> None:
    """标准 -> URL安全视图"""
    value = EncodedBase64("SGVsbG8gd29ybGQ=")

    url_value = value.url_encoded

    assert isinstance(url_value, URLEncodedBase64)
    assert url_value.text == "SGVsbG8gd29ybGQ"
    assert EncodedBase64.from_bytes(b"\xfb\xff\xbf").url_encoded.text == "-_-_"


def test_from_url_safe_restores_padding() -> None:
    value = EncodedBase64.from_url_safe(URLEncodedBase64.from_string("SGVsbG8gd29ybGQ"))

    assert value.text == "SGVsbG8gd29ybGQ="


def test_equality_and_hash_are_structural() -> None:
    """不同构造方式得到相同text时相等且哈希一致"""
    values = [
        EncodedBase64("SGVsbG8gd29ybGQ="),
        EncodedBase64.from_string("Hello world"),
        EncodedBase64.from_bytes(b"Hello world"),
        URLEncodedBase64.from_string("SGVsbG8gd29ybGQ").url_decoded,
    ]

    assert all(value == values[0] for value in values)
    assert len({hash(value) for value in values}) == 1
    assert len(set(values)) == 1
    assert {values[0]: "hello"}[values[-1]] == "hello"


def test_not_equal_to_url_encoded_with_same_text() -> None:
    assert EncodedBase64("Zm9v") != URLEncodedBase64("Zm9v")


def test_value_is_immutable() -> None:
    value = EncodedBase64("SGVsbG8gd29ybGQ=")

    with pytest.raises(ValidationError):
        value.root = "Zm9v"


def test_broken_invariant_is_fatal() -> None:
    """绕过校验构造的非法值在解码时抛出断言级错误，而不是InvalidBase64InputError"""
    value = EncodedBase64.model_construct("not base64!")

    with pytest.raises(CorruptedBase64ValueError) as exc_info:
        value.data

    assert isinstance(exc_info.value, AssertionError)
    assert not isinstance(exc_info.value, InvalidBase64InputError)


def test_str_returns_text() -> None:
    assert str(EncodedBase64("Zm9v")) == "Zm9v"


def test_standard_alphabet_characters_map_to_url_safe() -> None:
    assert EncodedBase64.from_string("SGVsbG8+d29ybGQ/").url_encoded.text == "SGVsbG8-d29ybGQ_"


def test_non_ascii_plaintext_is_encoded_as_utf8() -> None:
    raw_value = "こんにちは世界"

    value = EncodedBase64.from_string(raw_value)

    assert value.text == base64.b64encode(raw_value.encode("utf-8")).decode("ascii")
    assert value.data.decode("utf-8") == raw_value
