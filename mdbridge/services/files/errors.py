"""文件访问异常

所有异常的字符串形式都包含出错路径与操作系统给出的原因，可直接展示给用户。
原始 OSError 通过 ``raise ... from`` 保留在 ``__cause__`` 上。
"""

from __future__ import annotations


class FileAccessError(Exception):
    code = 'FILE_ACCESS_FAILED'
    action = '访问'

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(self.format_message())

    def format_message(self) -> str:
        return f"无法{self.action} '{self.path}': {self.reason}"

    @classmethod
    def from_os_error(cls, path: str, error: OSError) -> 'FileAccessError':
        return cls(path, error.strerror or str(error))


class ReadError(FileAccessError):
    code = 'READ_FAILED'
    action = '读取文件'


class WriteError(FileAccessError):
    code = 'WRITE_FAILED'
    action = '保存文件'


class ListError(FileAccessError):
    code = 'LIST_FAILED'
    action = '读取目录'

    def format_message(self) -> str:
        return f"无法{self.action} [{self.path}]: {self.reason}"


__all__ = ['FileAccessError', 'ReadError', 'WriteError', 'ListError']
