from app_factory import create_app
from routes.http import router as http_router
import os

app = create_app()
app.include_router(http_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=os.environ.get("CHATLOG_ANALYZER_HOST", "0.0.0.0"),
        port=int(os.environ.get("CHATLOG_ANALYZER_PORT", "8000")),
    )
