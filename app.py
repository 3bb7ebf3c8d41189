import uvicorn

from usergraph import Settings, configure_logging, create_app

settings = Settings.from_env()
configure_logging(settings.log_level)

app = create_app(settings)

if __name__ == '__main__':
    uvicorn.run(app, host=settings.host, port=settings.port)
