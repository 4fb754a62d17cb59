from fastapi import FastAPI
from k8s_controller import __version__
from k8s_controller.api.routes import health
from k8s_controller.api.middleware import RequestLoggingMiddleware

app = FastAPI(title="k8s-controller", version=__version__)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(health.router)
