"""Health check route, probed by the desktop shell before it talks to the backend."""

from __future__ import annotations

from flask import Blueprint

from mdbridge import __version__
from mdbridge.middleware import api_response

health_bp = Blueprint('health', __name__)


@health_bp.route('/health', methods=['GET'])
@api_response
def health_check():
	return {'status': 'ok', 'version': __version__}

__all__ = ['health_bp']
