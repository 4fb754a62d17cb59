from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

GREETING = "Hello from k8s-controller!"


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/{path:path}", response_class=PlainTextResponse)
def greeting(path: str):
    return GREETING
