import logging
import os
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pythonjsonlogger.json import JsonFormatter
from versionapp.core.config import settings

# 요청 단위 로그 컨텍스트 (미들웨어가 설정, 포매터가 읽음)
trace_id_var: ContextVar[str] = ContextVar("trace_id", default="-")
client_ip_var: ContextVar[str] = ContextVar("client_ip", default="-")

LOG_FORMAT = '%(@timestamp)s %(level)s %(mdc)s %(ip)s %(message)s'


class CustomJsonFormatter(JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super(CustomJsonFormatter, self).add_fields(log_record, record, message_dict)

        # @timestamp - UTC, 밀리초 단위
        if not log_record.get('@timestamp'):
            log_record['@timestamp'] = datetime.fromtimestamp(
                record.created, timezone.utc
            ).strftime('%Y-%m-%dT%H:%M:%S.%f')[:-3] + 'Z'

        log_record['level'] = record.levelname
        log_record['mdc'] = {"trace_id": trace_id_var.get()}
        log_record['ip'] = log_record.get('ip') or client_ip_var.get()

        log_record.pop('timestamp', None)
        log_record.pop('color_message', None)


def get_logger(name: str, level: str = None, log_file: str = None):
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.setLevel((level or settings.LOG_LEVEL).upper())

        formatter = CustomJsonFormatter(LOG_FORMAT)

        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

        # LOG_FILE 설정 시에만 파일 로테이션
        log_file = settings.LOG_FILE if log_file is None else str(log_file)
        if log_file:
            try:
                os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
                file_handler = RotatingFileHandler(
                    log_file, maxBytes=10 * 1024 * 1024, backupCount=3
                )
                file_handler.setFormatter(formatter)
                logger.addHandler(file_handler)
            except OSError:
                # 쓸 수 없는 경로면 stdout 만 사용
                logger.warning("LOG_FILE_UNAVAILABLE", extra={"log_file": log_file})

    return logger


logger = get_logger("versionapp", log_file=settings.LOG_FILE)
