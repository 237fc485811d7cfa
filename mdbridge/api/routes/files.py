"""Markdown file routes.

Provides the file-access surface used by the editor UI:
- POST /files/read   {path}           -> {path, content}
- POST /files/save   {path, content}  -> {path, message}
- POST /files/list   {path}           -> {current_path, parent_path, items, total_items}
"""

from __future__ import annotations

import os
from flask import Blueprint, current_app, request

from mdbridge.middleware import api_response

files_bp = Blueprint('files', __name__)


def _file_service():
	# create_app 按传入的 Settings 构建服务实例
	return current_app.extensions['file_service']


def _require_path(data: dict) -> str:
	path = data.get('path')
	if not isinstance(path, str) or not path.strip():
		raise ValueError('缺少必需字段: path')
	return path


@files_bp.route('/files/read', methods=['POST'])
@api_response
def read_file():
	data = request.get_json(silent=True) or {}
	path = _require_path(data)
	return {'path': path, 'content': _file_service().read_file(path)}


@files_bp.route('/files/save', methods=['POST'])
@api_response
def save_file():
	data = request.get_json(silent=True) or {}
	path = _require_path(data)
	content = data.get('content')
	if not isinstance(content, str):
		raise ValueError('content 必须是字符串')
	_file_service().write_file(path, content)
	return {'path': path, 'message': f'文件 {os.path.basename(path)} 保存成功'}


@files_bp.route('/files/list', methods=['POST'])
@api_response
def list_files():
	data = request.get_json(silent=True) or {}
	path = _require_path(data)
	nodes = _file_service().list_entries(path)
	parent = os.path.dirname(os.path.normpath(path))
	return {
		'current_path': path,
		'parent_path': parent if parent and parent != os.path.normpath(path) else None,
		'items': [n.to_dict() for n in nodes],
		'total_items': len(nodes)
	}

__all__ = ['files_bp']
