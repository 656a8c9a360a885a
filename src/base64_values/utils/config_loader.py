"""命令行配置加载器"""
from pathlib import Path
from typing import Any, Dict, Optional

import toml
from pydantic import ValidationError

from base64_values.models.cli_config import CliConfig
from base64_values.utils.exceptions import ConfigValidationError
from base64_values.utils.log_utils import get_logger

logger = get_logger()

# 配置文件中可选的外层表名，例如 [base64_values]
CONFIG_SECTION = "base64_values"


def load_config_dict(config_file: Path) -> Dict[str, Any]:
    """
    读取TOML配置文件
    :param config_file: 配置文件路径
    :return: 配置字典（已去除外层 [base64_values] 表）
    """
    if not config_file.exists():
        raise FileNotFoundError(f"配置文件不存在: {config_file}")

    logger.info(f"加载配置: {config_file}")
    with open(config_file, "r", encoding="utf-8") as f:
        config = toml.load(f)

    # 如果配置有嵌套结构（例如 [base64_values]），提取内容
    if CONFIG_SECTION in config:
        return config[CONFIG_SECTION]

    return config


def load_cli_config(config_file: Optional[Path] = None) -> CliConfig:
    """
    加载并校验命令行配置，未指定文件时使用默认配置
    :param config_file: 配置文件路径
    :return: CliConfig
    """
    if config_file is None:
        return CliConfig()

    config_dict = load_config_dict(Path(config_file))
    try:
        return CliConfig(**config_dict)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}" for error in e.errors()
        )
        raise ConfigValidationError(f"配置验证失败（{config_file}）：{details}") from e
