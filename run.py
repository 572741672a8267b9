"""
Script for starting the receipt processor
"""
if __name__ == "__main__":
    import uvicorn
    from receipt_processor.config import get_settings
    from receipt_processor.core.logging import setup_logging

    settings = get_settings()

    setup_logging(log_level=settings.LOG_LEVEL, is_debug=settings.DEBUG)

    print(f"🚀 Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    print(f"📡 Server: http://{settings.HOST}:{settings.PORT}")
    print(f"📚 Docs: http://{settings.HOST}:{settings.PORT}/docs")
    print(f"🔧 Debug mode: {settings.DEBUG}")
    print()

    uvicorn.run(
        "receipt_processor.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
