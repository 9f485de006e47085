"""Tool-call API endpoints"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable

from fastapi import APIRouter, Body, Depends, Request
from pydantic import BaseModel, ValidationError

from models.tools import (
    ApproveEditArgs,
    EditFileLinesArgs,
    GetFileLinesArgs,
    ToolCallRequest,
    ToolListResponse,
    ToolResponse,
    ToolSpec,
)
from services.edit_service import EditService
from services.errors import EditFileLinesError, format_error
from services.line_info import format_line_info

logger = logging.getLogger(__name__)

router = APIRouter()


def get_edit_service(request: Request) -> EditService:
    return request.app.state.edit_service


async def edit_file_lines(service: EditService, args: EditFileLinesArgs) -> str:
    proposal = await service.propose(args.p, args.operations(), dry_run=args.dryRun)
    return proposal.text


async def approve_edit(service: EditService, args: ApproveEditArgs) -> str:
    result = await service.approve(args.stateId)
    return result.diff_text


async def get_file_lines(service: EditService, args: GetFileLinesArgs) -> str:
    infos = await service.get_lines(args.path, args.lineNumbers, args.context)
    return format_line_info(infos)


ToolHandler = Callable[[EditService, Any], Awaitable[str]]

TOOLS: dict[str, tuple[str, type[BaseModel], ToolHandler]] = {
    "edit_file_lines": (
        "Make line-based edits to a file. Each edit is a tuple of [startLine, endLine, newContent] "
        "specifying a line range to replace with new content. When dryRun is true, returns a diff "
        "and a stateId that can be used with approve_edit tool to apply the edit. The stateId is "
        "only valid for 1 minute. Only works within allowed directories.",
        EditFileLinesArgs,
        edit_file_lines,
    ),
    "approve_edit": (
        "Approve and apply a previously validated edit from a dry run with edit_file_lines call "
        "using its stateId.",
        ApproveEditArgs,
        approve_edit,
    ),
    "get_file_lines": (
        "Get information about specific line numbers in a file, including their content and "
        "optional context lines. Useful for verifying line numbers before making edits. "
        "Only works within allowed directories.",
        GetFileLinesArgs,
        get_file_lines,
    ),
}


async def call_tool(service: EditService, name: str, arguments: dict[str, Any]) -> ToolResponse:
    """Run one tool; every failure comes back as an error-flagged response"""
    if name not in TOOLS:
        return ToolResponse.error(f"Error: Unknown tool: {name}")

    _, args_model, handler = TOOLS[name]
    try:
        args = args_model.model_validate(arguments)
    except ValidationError as e:
        return ToolResponse.error(f"Error: Invalid arguments for {name}: {e}")

    try:
        text = await handler(service, args)
    except EditFileLinesError as e:
        logger.info("%s failed: %s (%s)", name, e.message, e.kind)
        return ToolResponse.error(format_error(e))
    except Exception as e:
        logger.exception("Unexpected failure in %s", name)
        return ToolResponse.error(format_error(e))

    return ToolResponse.success(text)


@router.get("", response_model=ToolListResponse)
async def list_tools() -> ToolListResponse:
    """List available tools with their argument schemas"""
    return ToolListResponse(
        tools=[
            ToolSpec(name=name, description=description, inputSchema=model.model_json_schema())
            for name, (description, model, _) in TOOLS.items()
        ]
    )


@router.post("/call", response_model=ToolResponse)
async def call(
    request: ToolCallRequest,
    service: EditService = Depends(get_edit_service),
) -> ToolResponse:
    """Invoke a tool by name"""
    return await call_tool(service, request.name, request.arguments)


@router.post("/{name}", response_model=ToolResponse)
async def call_named(
    name: str,
    arguments: dict[str, Any] = Body(...),
    service: EditService = Depends(get_edit_service),
) -> ToolResponse:
    """Invoke a tool with the arguments object as the request body"""
    return await call_tool(service, name, arguments)
