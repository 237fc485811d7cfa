"""编码探测与解码工具

读取编辑器打开的任意文件时使用的解码级联：按固定优先级依次尝试候选解码器，
第一个成功的结果胜出；最后一步统计猜测永远成功，因此整个流程不会因编码问题失败。

优先级：
1. UTF-8 严格校验（去掉一个前导 BOM）
2. UTF-16 LE（BOM: FF FE）
3. UTF-16 BE（BOM: FE FF）
4. GB18030 严格解码（包含 GBK/GB2312，零错误才接受）
5. chardet 统计猜测，猜不出时回退 Windows-1252
"""

from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import chardet

logger = logging.getLogger(__name__)

UTF8_BOM_CHAR = '\ufeff'
UTF16_LE_BOM = b'\xff\xfe'
UTF16_BE_BOM = b'\xfe\xff'

# 统计猜测没有结果时使用的单字节代码页
FALLBACK_ENCODING = 'windows-1252'

Decoder = Callable[[bytes], Optional[str]]


@dataclass(frozen=True)
class DecodeResult:
    text: str
    encoding: str


def _try_utf8(data: bytes) -> Optional[str]:
    try:
        text = data.decode('utf-8')
    except UnicodeDecodeError:
        return None
    # 只去掉一个 BOM，之后的 U+FEFF 属于正文
    if text.startswith(UTF8_BOM_CHAR):
        return text[1:]
    return text


def _try_utf16_le(data: bytes) -> Optional[str]:
    if len(data) >= 2 and data.startswith(UTF16_LE_BOM):
        return data[2:].decode('utf-16-le', errors='replace')
    return None


def _try_utf16_be(data: bytes) -> Optional[str]:
    if len(data) >= 2 and data.startswith(UTF16_BE_BOM):
        return data[2:].decode('utf-16-be', errors='replace')
    return None


def _try_gb18030(data: bytes) -> Optional[str]:
    """GB18030 的单字节区与 ASCII 重叠，必须排在 UTF-8/UTF-16 之后，且零错误才接受。"""
    try:
        return data.decode('gb18030')
    except UnicodeDecodeError:
        return None


_DECODERS: Tuple[Tuple[str, Decoder], ...] = (
    ('utf-8', _try_utf8),
    ('utf-16-le', _try_utf16_le),
    ('utf-16-be', _try_utf16_be),
    ('gb18030', _try_gb18030),
)


def guess_encoding(data: bytes) -> str:
    """用 chardet 猜测编码，返回 Python 可识别的编码名。"""
    detected = chardet.detect(data) or {}
    name = detected.get('encoding')
    if not name:
        return FALLBACK_ENCODING
    try:
        codecs.lookup(name)
    except LookupError:
        return FALLBACK_ENCODING
    return name


def resolve_encoding(data: bytes, log: Optional[logging.Logger] = None) -> DecodeResult:
    """按优先级解码字节数据

    Args:
        data: 文件原始字节
        log: 诊断输出使用的 logger，默认为模块 logger

    Returns:
        DecodeResult(解码后的文本, 选中的编码)
    """
    log = log or logger
    for name, decoder in _DECODERS:
        text = decoder(data)
        if text is not None:
            log.debug(f"使用编码 {name} 解码成功 ({len(data)} 字节)")
            return DecodeResult(text, name)

    encoding = guess_encoding(data)
    log.warning(f"此文件编码识别困难，最终猜测为: {encoding}")
    return DecodeResult(data.decode(encoding, errors='replace'), encoding)


def decode_bytes(data: bytes, log: Optional[logging.Logger] = None) -> str:
    """解码字节数据，保证返回文本、不抛出解码异常。"""
    return resolve_encoding(data, log).text


__all__ = [
    'DecodeResult',
    'FALLBACK_ENCODING',
    'decode_bytes',
    'guess_encoding',
    'resolve_encoding',
]
