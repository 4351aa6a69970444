"""Client API Routes"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.error import ClientError
from src.api.schemas.catalog_request import CreateClientRequestSchema, ValidateRtnRequestSchema
from src.app.use_cases.clients import (
    CreateClient,
    GetClientByRtn,
    ListClients,
    ValidateRtn,
    CreateClientCommandDTO,
    ClientResponseDTO,
    ListClientsResponseDTO,
    RtnValidationResponseDTO,
)
from src.adapter.repositories.client_repository import SqlAlchemyClientRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session

router = APIRouter(tags=["Clients"])


@router.get("/clients", response_model=ListClientsResponseDTO)
async def list_clients(session: AsyncSession = Depends(get_session)):
    result = await ListClients(SqlAlchemyClientRepository(session)).execute()

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.get("/clients/rtn/{rtn}", response_model=ClientResponseDTO)
async def get_client_by_rtn(rtn: str, session: AsyncSession = Depends(get_session)):
    """Look up a client by RTN (404 when the RTN was never seen)."""
    result = await GetClientByRtn(SqlAlchemyClientRepository(session)).execute(rtn)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.post("/clients", response_model=ClientResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_client(
    request: CreateClientRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Register a client.

    **Returns:**
    - 201: Client created
    - 400: Malformed RTN or blank name
    - 409: RTN already registered
    """
    use_case = CreateClient(SqlAlchemyUnitOfWork(session), SqlAlchemyClientRepository(session))
    result = await use_case.execute(CreateClientCommandDTO(rtn=request.rtn, name=request.name))

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.post("/validate-rtn", response_model=RtnValidationResponseDTO)
async def validate_rtn(request: ValidateRtnRequestSchema):
    """Check that an RTN has exactly 14 digits (400 otherwise)."""
    result = await ValidateRtn().execute(request.rtn)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value
