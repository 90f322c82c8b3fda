# main.py
from fastapi import FastAPI
from photoshare.config import settings
from photoshare.database import store
from photoshare.api.errors import register_error_handlers
from photoshare.core.logger import logger

app = FastAPI(
    title=settings.app_name,
    debug=settings.debug
)

# 저장소 에러 -> HTTP 상태 코드
register_error_handlers(app)

@app.on_event("startup")
def startup_event():
    store.initialize()
    logger.info(f"{settings.app_name} 시작")

@app.on_event("shutdown")
def shutdown_event():
    store.close()
    logger.info(f"{settings.app_name} 종료")

@app.get("/health")
def health_check():
    """헬스체크 (DB 연결 포함)"""
    store.ping()
    return {
        "status": "healthy",
        "service": settings.app_name
    }
