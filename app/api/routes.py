"""
API route aggregator: register endpoints; no logic, only delegate to handlers and the store.
"""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Path, Query

from app.api.handlers import call_store, get_store
from app.core.config import AGENT_CODE_PATTERN
from app.core.database import AgentStore
from app.functions.echo import format_echo
from app.schemas.agent import (
    AgentCreate,
    AgentCreatedResponse,
    AgentPatch,
    AgentRecord,
    AgentReplace,
    CustomerRecord,
    MessageResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter()

# PUT/PATCH/DELETE validate the key; the GET lookups pass it through untouched
MutationCode = Annotated[str, Path(pattern=AGENT_CODE_PATTERN, description="The agent code (AGENT_CODE).")]
LookupCode = Annotated[str, Path(description="The agent code (AGENT_CODE).")]


# --- System ---

@router.get("/", tags=["system"])
def root():
    return {"status": "Sample agents API running"}


@router.get("/health", tags=["system"])
def health():
    return {"ok": True}


# --- Agents ---

@router.get(
    "/agents",
    response_model=list[AgentRecord],
    tags=["agents"],
    summary="Retrieve a list of agents",
)
async def list_agents(store: AgentStore = Depends(get_store)) -> list[dict[str, Any]]:
    return await call_store("list_agents", "Error getting agents data", store.list_agents())


@router.get(
    "/agents/{code}",
    response_model=list[AgentRecord],
    tags=["agents"],
    summary="Retrieve an agent by code",
    description="Returns every row with this AGENT_CODE; an unknown code yields an empty list, not 404.",
)
async def get_agent(code: LookupCode, store: AgentStore = Depends(get_store)) -> list[dict[str, Any]]:
    return await call_store("get_agent", "Error getting agent data", store.get_agents_by_code(code))


@router.post(
    "/agents",
    status_code=201,
    response_model=AgentCreatedResponse,
    tags=["agents"],
    summary="Create a new agent",
    description="All six fields are required. 400 lists every violation; 500 if the insert fails.",
)
async def create_agent(body: AgentCreate, store: AgentStore = Depends(get_store)) -> AgentCreatedResponse:
    logger.info("[api:create_agent] IN  code=%r", body.agent_code)
    agent_id = await call_store("create_agent", "Error creating agent", store.create_agent(body.to_columns()))
    return AgentCreatedResponse(message="Agent created", agent_id=agent_id)


@router.put(
    "/agents/{code}",
    response_model=MessageResponse,
    tags=["agents"],
    summary="Update an existing agent by code",
    description="Replaces all mutable fields. Succeeds even when no row has this code.",
)
async def replace_agent(
    body: AgentReplace,
    code: MutationCode,
    store: AgentStore = Depends(get_store),
) -> MessageResponse:
    await call_store("replace_agent", "Error updating agent", store.replace_agent(code, body.to_columns()))
    return MessageResponse(message="Agent updated")


@router.patch(
    "/agents/{code}",
    response_model=MessageResponse,
    tags=["agents"],
    summary="Partially update an existing agent by code",
    description="Updates only the supplied fields. Unknown fields and empty bodies are rejected with 400.",
)
async def patch_agent(
    body: AgentPatch,
    code: MutationCode,
    store: AgentStore = Depends(get_store),
) -> MessageResponse:
    await call_store(
        "patch_agent",
        "Error partially updating agent",
        store.update_agent_fields(code, body.to_columns(only_set=True)),
    )
    return MessageResponse(message="Agent partially updated")


@router.delete(
    "/agents/{code}",
    response_model=MessageResponse,
    tags=["agents"],
    summary="Delete an agent by code",
    description="Succeeds even when no row has this code.",
)
async def delete_agent(code: MutationCode, store: AgentStore = Depends(get_store)) -> MessageResponse:
    await call_store("delete_agent", "Error deleting agent", store.delete_agent(code))
    return MessageResponse(message="Agent deleted")


# --- Customers ---

@router.get(
    "/agent_cust/{code}",
    response_model=list[CustomerRecord],
    tags=["customers"],
    summary="Get a list of an agent's customers by agent code",
)
async def list_agent_customers(code: LookupCode, store: AgentStore = Depends(get_store)) -> list[dict[str, Any]]:
    return await call_store(
        "list_agent_customers",
        "Error getting agent customer data",
        store.list_customers_by_agent(code),
    )


# --- Echo ---

@router.get("/echo", tags=["echo"], summary="Echo a keyword", response_model=str)
def echo(keyword: str | None = Query(None, description="Word to echo back.")) -> str:
    return format_echo(keyword)
