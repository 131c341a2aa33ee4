from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..api import UnknownToolError, call_tool, get_tool, get_tools
from ..config import get_settings

logger = logging.getLogger(__name__)

_settings = get_settings()
app = FastAPI(title=_settings.server.name, version=_settings.server.version)


class ToolCallRequest(BaseModel):
    arguments: Dict[str, Any] = Field(default_factory=dict)


@app.get("/api/tools")
async def list_tools() -> JSONResponse:
    return JSONResponse({"tools": [tool.describe() for tool in get_tools()]})


@app.post("/api/tools/{tool_name}")
def invoke_tool(tool_name: str, request: ToolCallRequest) -> JSONResponse:
    try:
        tool = get_tool(tool_name)
    except UnknownToolError as exc:
        logger.warning("Tool not found: %s", tool_name)
        raise HTTPException(status_code=404, detail=f"Tool '{tool_name}' is not registered.") from exc
    try:
        tool.signature.bind(**request.arguments)
    except TypeError as exc:
        logger.warning("Bad arguments for tool %s: %s", tool_name, exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    result = call_tool(tool_name, **request.arguments)
    logger.debug("Tool %s executed successfully", tool_name)
    return JSONResponse({"name": tool_name, "result": result})


def run_local_server(host: str = "127.0.0.1", port: int = 8000) -> None:
    import asyncio

    from hypercorn.asyncio import serve
    from hypercorn.config import Config

    config = Config()
    config.bind = [f"{host}:{port}"]
    logger.info("Starting HTTP tool server on %s:%s", host, port)
    asyncio.run(serve(app, config))
