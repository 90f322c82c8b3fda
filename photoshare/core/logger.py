# photoshare/core/logger.py
from loguru import logger
import sys
import os

from photoshare.config import settings

# 기본 로거 제거
logger.remove()

# 콘솔 출력
logger.add(
    sys.stdout,
    colorize=True,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    level=settings.log_level
)

if settings.log_to_file:
    # 로그 디렉토리 생성
    os.makedirs(settings.log_dir, exist_ok=True)

    # 파일 출력 (모든 로그)
    logger.add(
        os.path.join(settings.log_dir, "photoshare.log"),
        rotation="10 MB",
        retention="30 days",
        compression="zip",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        level="DEBUG"
    )

    # 에러 전용 파일
    logger.add(
        os.path.join(settings.log_dir, "error.log"),
        rotation="10 MB",
        retention="30 days",
        compression="zip",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        level="ERROR"
    )
