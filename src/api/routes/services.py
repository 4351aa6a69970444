"""Catalog API Routes

FastAPI routes for managing services and products.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.error import ClientError
from src.api.schemas.catalog_request import CreateServiceRequestSchema, UpdateServiceRequestSchema
from src.app.use_cases.catalog import (
    CreateService,
    UpdateService,
    DeleteService,
    GetService,
    ListServices,
    CreateServiceCommandDTO,
    UpdateServiceCommandDTO,
    ServiceResponseDTO,
    ListServicesResponseDTO,
)
from src.adapter.repositories.service_repository import SqlAlchemyServiceRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session

router = APIRouter(prefix="/services", tags=["Catalog"])


@router.get("", response_model=ListServicesResponseDTO)
async def list_services(
    category: Optional[str] = None,
    session: AsyncSession = Depends(get_session),
):
    """List active catalog services ordered by code."""
    result = await ListServices(SqlAlchemyServiceRepository(session)).execute(category=category)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.get("/{service_id}", response_model=ServiceResponseDTO)
async def get_service(
    service_id: str,
    session: AsyncSession = Depends(get_session),
):
    result = await GetService(SqlAlchemyServiceRepository(session)).execute(service_id)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.post("", response_model=ServiceResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_service(
    request: CreateServiceRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Add a service or product to the catalog.

    **Returns:**
    - 201: Service created
    - 409: Another active service already uses the code
    """
    command = CreateServiceCommandDTO(**request.model_dump())
    use_case = CreateService(SqlAlchemyUnitOfWork(session), SqlAlchemyServiceRepository(session))
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.put("/{service_id}", response_model=ServiceResponseDTO)
async def update_service(
    service_id: str,
    request: UpdateServiceRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Update some fields of a service.

    Invoices already issued are not affected.

    **Returns:**
    - 200: Service updated
    - 404: Service not found
    - 409: New code already in use
    """
    command = UpdateServiceCommandDTO(**request.model_dump(exclude_unset=True))
    use_case = UpdateService(SqlAlchemyUnitOfWork(session), SqlAlchemyServiceRepository(session))
    result = await use_case.execute(service_id, command)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_service(
    service_id: str,
    session: AsyncSession = Depends(get_session),
):
    """Remove a service from the catalog."""
    use_case = DeleteService(SqlAlchemyUnitOfWork(session), SqlAlchemyServiceRepository(session))
    result = await use_case.execute(service_id)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
