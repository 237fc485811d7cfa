"""Application data models."""

from dataclasses import dataclass
from typing import List, Dict, Any, Optional


@dataclass
class FileNode:
    name: str
    path: str
    is_dir: bool
    # 目录列表只扫描一层，children 始终为 None，保留给递归遍历
    children: Optional[List['FileNode']] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'path': self.path,
            'is_dir': self.is_dir,
            'children': [c.to_dict() for c in self.children] if self.children is not None else None
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FileNode':
        children = data.get('children')
        return cls(
            name=data['name'],
            path=data['path'],
            is_dir=bool(data.get('is_dir', False)),
            children=[cls.from_dict(c) for c in children] if children is not None else None
        )

    def sort_key(self):
        """目录在前，同组内按名称忽略大小写排序。"""
        return (not self.is_dir, self.name.lower())


__all__ = ['FileNode']
