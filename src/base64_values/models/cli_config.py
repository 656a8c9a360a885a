"""命令行配置模型"""
import codecs
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

Alphabet = Literal["standard", "url_safe"]


class LogConfig(BaseModel):
    """日志配置模型"""

    level: str = Field(default="WARNING", description="日志级别")
    log_path: Optional[Path] = Field(default=None, description="日志文件路径")
    rotation: str = Field(default="10 MB", description="日志轮转规则")
    retention: int = Field(default=7, description="日志保留天数")

    @field_validator("level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """日志级别统一为大写"""
        return v.upper()


class CliConfig(BaseModel):
    """命令行工具核心配置模型"""

    # 未指定 --alphabet 时使用的字母表
    default_alphabet: Alphabet = Field(default="standard", description="默认字母表：standard / url_safe")
    # 解码结果按此编码打印，失败时输出十六进制
    text_encoding: str = Field(default="utf-8", description="解码结果的文本编码")
    # 日志配置
    log_config: LogConfig = Field(default_factory=LogConfig, description="Loguru日志配置")

    @field_validator("text_encoding")
    @classmethod
    def validate_text_encoding(cls, v: str) -> str:
        """校验文本编码名称是否可被Python识别"""
        try:
            codecs.lookup(v)
            # rot13、base64、zlib 等非文本编解码器也能被 lookup 找到，需实际编解码一次
            "".encode(v)
            b"".decode(v)
        except LookupError:
            raise ValueError(f"不支持的文本编码：{v}")
        return v
