"""Client lookup use cases"""

from libs.result import Result, Return, Error
from src.app.errors import ErrorCode
from src.app.repositories.client_repository import ClientRepository
from src.domain.client import is_valid_rtn, RTN_LENGTH
from .dtos import (
    ClientResponseDTO,
    ListClientsResponseDTO,
    RtnValidationResponseDTO,
    to_client_dto,
)


class GetClientByRtn:
    """Use Case: Look up a client by RTN"""

    def __init__(self, client_repo: ClientRepository):
        self.client_repo = client_repo

    async def execute(self, rtn: str) -> Result[ClientResponseDTO]:
        try:
            client = await self.client_repo.get_by_rtn(rtn.strip())
            if not client:
                return Return.err(
                    Error(
                        code=ErrorCode.CLIENT_NOT_FOUND,
                        message=f"Client with RTN {rtn} not found",
                        reason="RTN not registered",
                    )
                )
            return Return.ok(to_client_dto(client))

        except Exception as e:
            return Return.err(
                Error(
                    code=ErrorCode.STORAGE_FAILURE,
                    message="Failed to retrieve client",
                    reason=str(e),
                )
            )


class ListClients:
    """Use Case: List registered clients"""

    def __init__(self, client_repo: ClientRepository):
        self.client_repo = client_repo

    async def execute(self) -> Result[ListClientsResponseDTO]:
        try:
            clients = await self.client_repo.list_all()
            return Return.ok(
                ListClientsResponseDTO(
                    clients=[to_client_dto(client) for client in clients],
                    total=len(clients),
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code=ErrorCode.STORAGE_FAILURE,
                    message="Failed to list clients",
                    reason=str(e),
                )
            )


class ValidateRtn:
    """Use Case: Check the format of a Honduran RTN"""

    async def execute(self, rtn: str) -> Result[RtnValidationResponseDTO]:
        if not is_valid_rtn((rtn or "").strip()):
            return Return.err(
                Error(
                    code=ErrorCode.VALIDATION_ERROR,
                    message=f"RTN debe tener exactamente {RTN_LENGTH} dígitos",
                    reason=f"rtn={rtn!r}",
                )
            )
        return Return.ok(RtnValidationResponseDTO(valid=True, message="RTN válido"))
