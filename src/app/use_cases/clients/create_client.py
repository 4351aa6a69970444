"""CreateClient Use Case

Registers a client explicitly (invoices register clients implicitly).
"""

from libs.result import Result, Return, Error
from src.app.errors import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.client_repository import ClientRepository
from src.domain.client import Client, is_valid_rtn, RTN_LENGTH
from .dtos import CreateClientCommandDTO, ClientResponseDTO, to_client_dto


class CreateClient:
    """
    Use Case: Register client

    Business Rules:
    1. RTN is exactly 14 digits and name is not blank
    2. RTN must not be registered already
    """

    def __init__(self, uow: UnitOfWork, client_repo: ClientRepository):
        self.uow = uow
        self.client_repo = client_repo

    async def execute(self, command: CreateClientCommandDTO) -> Result[ClientResponseDTO]:
        rtn = command.rtn.strip()
        name = command.name.strip()

        if not is_valid_rtn(rtn):
            return Return.err(
                Error(
                    code=ErrorCode.VALIDATION_ERROR,
                    message=f"RTN must have exactly {RTN_LENGTH} digits",
                    reason=f"rtn={command.rtn!r}",
                )
            )
        if not name:
            return Return.err(
                Error(
                    code=ErrorCode.VALIDATION_ERROR,
                    message="Client name is required",
                    reason="name is blank",
                )
            )

        try:
            if await self.client_repo.get_by_rtn(rtn):
                return Return.err(
                    Error(
                        code=ErrorCode.CLIENT_ALREADY_EXISTS,
                        message=f"Client with RTN {rtn} already exists",
                        reason="Duplicate RTN",
                    )
                )

            client = await self.client_repo.create(Client(rtn=rtn, name=name))
            await self.uow.commit()
            return Return.ok(to_client_dto(client))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code=ErrorCode.STORAGE_FAILURE,
                    message="Failed to create client",
                    reason=str(e),
                )
            )
