"""Interaction endpoint. Every path and method routes here."""
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from core.dispatcher import InteractionDispatcher
from core.errors import InvalidMethodError
from middleware.logging import log_interaction, generate_request_id
from middleware.security import verify_request_signature
from models.interactions import Interaction

router = APIRouter()

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS", "TRACE", "CONNECT"]


@router.api_route("/{path:path}", methods=ALL_METHODS)
async def interactions(request: Request, path: str = ""):
    """
    Verify, decode and dispatch one interaction.

    Signature verification runs before the body is parsed; nothing touches
    the stores until it passes.
    """
    request_id = generate_request_id()
    request.state.request_id = request_id
    ctx = request.app.state.context

    if request.method != "POST":
        raise InvalidMethodError(request.method)

    body = await request.body()
    verify_request_signature(request.headers, body, ctx.public_key)

    interaction = Interaction.parse_body(body)
    response = await InteractionDispatcher(ctx).dispatch(interaction)
    payload = response.to_dict()

    user_id = None
    if interaction.member and interaction.member.user:
        user_id = interaction.member.user.id
    elif interaction.user:
        user_id = interaction.user.id

    log_interaction(
        request_id,
        interaction.type,
        command=interaction.data.name if interaction.data else None,
        user_id=user_id,
        response=payload
    )

    return JSONResponse(payload, media_type="application/json")
