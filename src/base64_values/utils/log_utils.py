"""日志工具模块"""
import sys
from typing import TYPE_CHECKING, Optional

from loguru import logger

if TYPE_CHECKING:
    from base64_values.models.cli_config import LogConfig

CONSOLE_FORMAT = "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(log_config: Optional["LogConfig"] = None, level: Optional[str] = None) -> None:
    """
    按 LogConfig 配置 Loguru 日志
    :param log_config: 日志配置，为None时只输出到控制台
    :param level: 日志级别，优先于 log_config.level
    """
    level = (level or (log_config.level if log_config else "WARNING")).upper()

    # 包导入时默认禁用了日志，这里显式开启
    logger.enable("base64_values")

    # 移除默认处理器
    logger.remove()

    # 控制台输出走stderr，避免污染命令行的编码结果
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)

    # 如果指定了日志文件路径，添加文件输出
    if log_config and log_config.log_path:
        log_config.log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_config.log_path),
            level=level,
            rotation=log_config.rotation,
            retention=f"{log_config.retention} days",
            format=FILE_FORMAT,
        )


def get_logger():
    """获取 logger 实例"""
    return logger
