"""命令行接口"""
import sys
from pathlib import Path

import click

from base64_values.models.cli_config import CliConfig
from base64_values.models.encoded_base64 import EncodedBase64
from base64_values.models.url_encoded_base64 import URLEncodedBase64
from base64_values.utils.codec import Base64Codec
from base64_values.utils.config_loader import load_cli_config
from base64_values.utils.log_utils import get_logger, setup_logger

logger = get_logger()

ALPHABET_CHOICE = click.Choice(["standard", "url_safe"])


def _resolve_alphabet(config: CliConfig, alphabet: str = None) -> str:
    return alphabet or config.default_alphabet


@click.group()
@click.option("--conf", "-c", help="配置文件路径（TOML格式）")
@click.option("--log-level", help="日志级别（覆盖配置文件）")
@click.pass_context
def cli(ctx: click.Context, conf: str = None, log_level: str = None):
    """Base64 Values CLI - 标准/URL安全Base64编解码工具"""
    try:
        config = load_cli_config(Path(conf) if conf else None)
    except Exception as e:
        click.echo(f"❌ 配置加载失败：{e}", err=True)
        sys.exit(1)

    setup_logger(config.log_config, level=log_level)
    ctx.obj = config


@cli.command("encode")
@click.argument("plaintext")
@click.option("--alphabet", "-a", type=ALPHABET_CHOICE, help="输出字母表（默认取配置）")
@click.pass_obj
def encode(config: CliConfig, plaintext: str, alphabet: str = None):
    """将明文按UTF-8编码为Base64"""
    try:
        value = EncodedBase64.from_bytes(plaintext.encode("utf-8"))
        if _resolve_alphabet(config, alphabet) == "url_safe":
            value = value.url_encoded
        click.echo(value.text)
    except Exception as e:
        click.echo(f"❌ 编码失败：{e}", err=True)
        sys.exit(1)


@cli.command("decode")
@click.argument("value")
@click.option("--alphabet", "-a", type=ALPHABET_CHOICE, help="输入字母表（默认取配置）")
@click.pass_obj
def decode(config: CliConfig, value: str, alphabet: str = None):
    """解码Base64，按配置的文本编码输出，无法解码为文本时输出十六进制"""
    alphabet = _resolve_alphabet(config, alphabet)
    # 解码只接受严格合法的输入，不走明文回退
    if alphabet == "url_safe":
        if not Base64Codec.is_url_safe(value):
            click.echo(f"❌ 不是合法的URL安全Base64：{value}", err=True)
            sys.exit(1)
        data = URLEncodedBase64.from_string(value).data
    else:
        if not Base64Codec.is_valid(value):
            click.echo(f"❌ 不是合法的标准Base64：{value}", err=True)
            sys.exit(1)
        data = EncodedBase64.from_string(value).data

    try:
        click.echo(data.decode(config.text_encoding))
    except UnicodeDecodeError:
        logger.debug(f"解码结果无法按 {config.text_encoding} 解释，改为输出十六进制")
        click.echo(data.hex())


@cli.command("convert")
@click.argument("value")
@click.option("--to", "target", type=ALPHABET_CHOICE, required=True, help="目标字母表")
def convert(value: str, target: str):
    """在标准与URL安全字母表之间转换（非Base64输入会按UTF-8明文编码）"""
    try:
        url_value = URLEncodedBase64.from_string(value)
    except Exception as e:
        click.echo(f"❌ 转换失败：{e}", err=True)
        sys.exit(1)

    if target == "url_safe":
        click.echo(url_value.text)
    else:
        click.echo(url_value.url_decoded.text)


@cli.command("validate")
@click.argument("value")
@click.option("--alphabet", "-a", type=ALPHABET_CHOICE, help="校验所用字母表（默认取配置）")
@click.pass_obj
def validate_cmd(config: CliConfig, value: str, alphabet: str = None):
    """严格校验字符串是否已是合法的Base64"""
    alphabet = _resolve_alphabet(config, alphabet)
    is_valid = Base64Codec.is_url_safe(value) if alphabet == "url_safe" else Base64Codec.is_valid(value)

    if is_valid:
        click.echo(f"✅ 合法的{alphabet} Base64：{value}")
        sys.exit(0)

    click.echo(f"❌ 不是合法的{alphabet} Base64：{value!r}", err=True)
    if value:
        click.echo("   注意：from_string 会将其视为明文重新编码", err=True)
    sys.exit(1)


if __name__ == "__main__":
    cli()
