__version__ = '0.1.0'

import os
import logging
from logging.handlers import TimedRotatingFileHandler, WatchedFileHandler
from typing import Optional
from flask import Flask
from flask_cors import CORS

from .config.system_settings import Settings
from .middleware import register_error_handlers, setup_middleware
from .api.routes import register_routes
from .services import MarkdownFileService


def create_app(settings: Optional[Settings] = None) -> Flask:
    settings = settings or Settings()
    app = Flask(__name__)
    app.config.update(settings.to_flask_config())

    # 前端由桌面壳加载，来源不固定
    CORS(app, origins="*", methods=["GET", "POST", "OPTIONS"], allow_headers=["Content-Type", "X-Requested-With"])

    _configure_logging(settings)

    setup_middleware(app)
    register_error_handlers(app)
    app.extensions['file_service'] = MarkdownFileService(extensions=settings.markdown_extensions())
    register_routes(app)

    logging.getLogger(__name__).info("应用初始化完成")
    return app


def _configure_logging(settings: Settings):
    root_logger = logging.getLogger()
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console = logging.StreamHandler()
    console.setLevel(level)
    formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(name)s: %(message)s', '%Y-%m-%d %H:%M:%S')
    console.setFormatter(formatter)
    root_logger.addHandler(console)

    if not settings.LOG_TO_FILE:
        return

    try:
        log_file = os.path.join(settings.LOG_DIR, settings.LOG_FILE_NAME)
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        # 多进程或外部 logrotate 场景下使用 WatchedFileHandler
        if settings.USE_WATCHED_LOG:
            file_handler = WatchedFileHandler(log_file, encoding='utf-8')
        else:
            file_handler = TimedRotatingFileHandler(log_file, when='midnight', backupCount=settings.LOG_BACKUP_COUNT, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
    except OSError as e:
        logging.getLogger(__name__).warning(f'文件日志配置失败: {e}')


__all__ = ['create_app', 'Settings', '__version__']
