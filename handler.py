# AWS Lambda entry point: handler.handler
from app.main import handler  # noqa: F401
