import uvicorn
from versionapp.app import create_app
from versionapp.core.config import settings

app = create_app(settings)


def run():
    # 외부에서 종료될 때까지 블로킹
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT
    )
