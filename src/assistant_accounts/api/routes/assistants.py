"""
Assistants API Routes

Admin-only CRUD endpoints for assistant accounts.

All request data is read through UntrustedInput so that nothing reaches a
Mongo filter or update document without passing the sanitizer.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError

from assistant_accounts.api.dependencies import get_repository, get_sanitizer
from assistant_accounts.config import AppConfig
from assistant_accounts.database.repository import AssistantRepository
from assistant_accounts.models.assistant import AccountState, Assistant, AssistantPublic
from assistant_accounts.security.auth import get_config, require_admin
from assistant_accounts.security.passwords import hash_password
from assistant_accounts.security.sanitizer import PayloadTooDeepError, SanitizationError, Sanitizer
from assistant_accounts.security.untrusted import UntrustedInput

logger = logging.getLogger("assistant_accounts.routes.assistants")

router = APIRouter(dependencies=[Depends(require_admin)])

SCALAR_FIELDS = ("name", "phone", "role", "account_state")


async def read_payload(request: Request, sanitizer: Sanitizer) -> Any:
    """
    Parse the JSON body without trusting its shape.

    Raises:
        PayloadTooDeepError: If the body nests too deeply for the JSON decoder
    """
    body = await request.body()
    if not body:
        return {}
    try:
        return await request.json()
    except RecursionError:
        raise PayloadTooDeepError(sanitizer.max_depth)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid JSON body")


def clean_id(raw_id: str, sanitizer: Sanitizer) -> str:
    """Sanitize an assistant id taken from the URL."""
    safe_id = UntrustedInput(raw_id, sanitizer).value("id")
    if not isinstance(safe_id, str) or not safe_id.strip():
        raise HTTPException(status_code=400, detail="Invalid ID")
    return safe_id


def non_blank(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def bad_request(e: SanitizationError) -> HTTPException:
    logger.warning(f"Rejected input: {e}")
    return HTTPException(status_code=400, detail=str(e))


def server_error(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e}")
    return HTTPException(status_code=500, detail="Internal server error")


@router.get("")
async def list_assistants(repository: AssistantRepository = Depends(get_repository)):
    """List all assistants."""
    try:
        docs = await repository.list_assistants()
        assistants = []
        for doc in docs:
            try:
                assistants.append(AssistantPublic.from_document(doc).model_dump())
            except ValidationError as e:
                logger.warning(f"Skipping malformed assistant document {doc.get('id')!r}: {e.error_count()} errors")
        return assistants
    except HTTPException:
        raise
    except Exception as e:
        raise server_error("list assistants", e)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_assistant(
    request: Request,
    repository: AssistantRepository = Depends(get_repository),
    sanitizer: Sanitizer = Depends(get_sanitizer),
    config: AppConfig = Depends(get_config),
):
    """
    Create an assistant.

    id, name and password are required. role defaults to "assistant" and
    account_state to "Activated".
    """
    try:
        data = UntrustedInput(await read_payload(request, sanitizer), sanitizer)

        assistant_id = data.field("id")
        name = data.field("name")
        password = data.secret("password")
        if not (non_blank(assistant_id) and non_blank(name) and non_blank(password)):
            raise HTTPException(status_code=400, detail="id, name and password are required")

        if await repository.exists(assistant_id):
            raise HTTPException(status_code=409, detail="Assistant ID already exists")

        phone = data.field("phone")
        role = data.field("role")
        account_state = data.field("account_state")
        profile = data.document().get("profile") if data.has("profile") else None

        assistant = Assistant(
            id=assistant_id,
            name=name,
            phone=phone if non_blank(phone) else None,
            role=role if non_blank(role) else "assistant",
            account_state=account_state if non_blank(account_state) else AccountState.ACTIVATED.value,
            profile=profile if isinstance(profile, dict) else None,
            password=await run_in_threadpool(hash_password, password, config.security.bcrypt_rounds),
        )
        await repository.create_assistant(assistant.to_document())

        return {"success": True, "assistant": AssistantPublic.from_document(assistant.to_document()).model_dump()}
    except HTTPException:
        raise
    except SanitizationError as e:
        raise bad_request(e)
    except Exception as e:
        raise server_error("create assistant", e)


@router.get("/{assistant_id}")
async def get_assistant(
    assistant_id: str,
    repository: AssistantRepository = Depends(get_repository),
    sanitizer: Sanitizer = Depends(get_sanitizer),
):
    """Get a single assistant by id."""
    safe_id = clean_id(assistant_id, sanitizer)
    try:
        doc = await repository.get_assistant(safe_id)
        if not doc:
            raise HTTPException(status_code=404, detail="Assistant not found")
        return AssistantPublic.from_document(doc).model_dump()
    except HTTPException:
        raise
    except Exception as e:
        raise server_error("get assistant", e)


@router.put("/{assistant_id}")
async def update_assistant(
    assistant_id: str,
    request: Request,
    repository: AssistantRepository = Depends(get_repository),
    sanitizer: Sanitizer = Depends(get_sanitizer),
    config: AppConfig = Depends(get_config),
):
    """
    Update an assistant.

    Blank or missing fields are left untouched. A new id must not belong
    to another assistant.
    """
    safe_id = clean_id(assistant_id, sanitizer)
    try:
        data = UntrustedInput(await read_payload(request, sanitizer), sanitizer)
        update = {}

        for name in SCALAR_FIELDS:
            value = data.field(name)
            if non_blank(value):
                update[name] = value

        password = data.secret("password")
        if non_blank(password):
            update["password"] = await run_in_threadpool(
                hash_password, password, config.security.bcrypt_rounds
            )

        new_id = data.field("id")
        if non_blank(new_id) and new_id != safe_id:
            if await repository.exists(new_id):
                raise HTTPException(status_code=409, detail="Assistant ID already exists")
            update["id"] = new_id

        if data.has("profile"):
            profile = data.document().get("profile")
            if isinstance(profile, dict):
                update["profile"] = profile

        if not update:
            raise HTTPException(status_code=400, detail="No valid fields to update")

        matched = await repository.update_assistant(safe_id, update)
        if not matched:
            raise HTTPException(status_code=404, detail="Assistant not found")
        return {"success": True}
    except HTTPException:
        raise
    except SanitizationError as e:
        raise bad_request(e)
    except Exception as e:
        raise server_error("update assistant", e)


@router.delete("/{assistant_id}")
async def delete_assistant(
    assistant_id: str,
    repository: AssistantRepository = Depends(get_repository),
    sanitizer: Sanitizer = Depends(get_sanitizer),
):
    """Delete an assistant."""
    safe_id = clean_id(assistant_id, sanitizer)
    try:
        deleted = await repository.delete_assistant(safe_id)
        if not deleted:
            raise HTTPException(status_code=404, detail="Assistant not found")
        return {"success": True}
    except HTTPException:
        raise
    except Exception as e:
        raise server_error("delete assistant", e)
