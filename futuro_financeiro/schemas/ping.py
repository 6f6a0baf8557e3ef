"""Pydantic schema for the health-check endpoint."""

from pydantic import BaseModel

from futuro_financeiro import __version__


class PingResponse(BaseModel):
    message: str = "pong"
    version: str = __version__
