"""Markdown file access service (read / save / list)."""

from __future__ import annotations

import os
import logging
from typing import Iterable, List, Optional, Tuple

from mdbridge.models import FileNode
from mdbridge.services.utils.encoding import resolve_encoding
from .errors import ReadError, WriteError, ListError

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: Tuple[str, ...] = ('.md', '.markdown')


def is_markdown_name(name: str, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> bool:
	lower_name = name.lower()
	return any(lower_name.endswith(ext) for ext in extensions)


class MarkdownFileService:
	def __init__(self, logger: Optional[logging.Logger] = None, extensions: Iterable[str] = DEFAULT_EXTENSIONS):
		self.logger = logger or logging.getLogger(__name__)
		self.extensions = tuple(ext.lower() for ext in extensions)

	def read_file(self, path: str) -> str:
		"""读取文件并自动识别编码，返回不含 BOM 的文本。"""
		self.logger.info(f"Request to read file: '{path}'")
		try:
			with open(path, 'rb') as f:
				data = f.read()
		except OSError as e:
			raise ReadError.from_os_error(path, e) from e
		result = resolve_encoding(data, self.logger)
		self.logger.debug(f"'{path}' 解码为 {result.encoding}")
		return result.text

	def write_file(self, path: str, content: str) -> None:
		"""以 UTF-8 原样写入（创建或截断），不做换行转换。"""
		data = content.encode('utf-8')
		try:
			with open(path, 'wb') as f:
				f.write(data)
		except OSError as e:
			raise WriteError.from_os_error(path, e) from e
		self.logger.info(f"Saved {len(data)} bytes to '{path}'")

	def list_entries(self, path: str) -> List[FileNode]:
		"""列出目录下一层的子目录与 Markdown 文件（忽略隐藏项）。"""
		try:
			entries = os.scandir(path)
		except OSError as e:
			raise ListError.from_os_error(path, e) from e

		files: List[FileNode] = []
		try:
			with entries:
				for entry in entries:
					try:
						is_dir = entry.is_dir()
					except OSError:
						continue
					name = entry.name
					self.logger.debug(f"Scanning: {name} (is_dir: {is_dir})")
					if name.startswith('.'):
						continue
					if is_dir or is_markdown_name(name, self.extensions):
						files.append(FileNode(name=name, path=entry.path, is_dir=is_dir))
		except OSError as e:
			# 单个条目 stat 失败已跳过，这里是读取目录本身中途出错
			raise ListError.from_os_error(path, e) from e

		files.sort(key=FileNode.sort_key)
		self.logger.info(f"Found {len(files)} files in {path}")
		return files


__all__ = ['MarkdownFileService', 'is_markdown_name', 'DEFAULT_EXTENSIONS']
