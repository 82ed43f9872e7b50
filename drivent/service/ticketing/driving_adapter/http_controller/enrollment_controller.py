from fastapi import APIRouter, Depends, Query, Response, status

from drivent.platform.logging.loguru_io import Logger
from drivent.service.ticketing.app.command.upsert_enrollment_use_case import (
    UpsertEnrollmentUseCase,
)
from drivent.service.ticketing.app.query.get_address_from_cep_use_case import (
    GetAddressFromCepUseCase,
)
from drivent.service.ticketing.app.query.get_enrollment_use_case import GetEnrollmentUseCase
from drivent.service.ticketing.domain.entity.enrollment_entity import AddressEntity
from drivent.service.ticketing.driving_adapter.http_controller.auth.session_auth import (
    get_current_user_id,
)
from drivent.service.ticketing.driving_adapter.http_controller.schema.enrollment_schema import (
    AddressResponse,
    CepAddressResponse,
    EnrollmentResponse,
    UpsertEnrollmentRequest,
)


router = APIRouter()


@router.get('', status_code=status.HTTP_200_OK, response_model=EnrollmentResponse)
@Logger.io
async def get_enrollment(
    user_id: int = Depends(get_current_user_id),
    use_case: GetEnrollmentUseCase = Depends(GetEnrollmentUseCase.depends),
) -> EnrollmentResponse | Response:
    enrollment = await use_case.get_by_user_id(user_id=user_id)
    if enrollment is None or enrollment.address is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    address = enrollment.address
    return EnrollmentResponse(
        id=enrollment.id or 0,
        name=enrollment.name,
        cpf=enrollment.cpf,
        birthday=enrollment.birthday,
        phone=enrollment.phone,
        address=AddressResponse(
            id=address.id or 0,
            cep=address.cep,
            street=address.street,
            city=address.city,
            state=address.state,
            number=address.number,
            neighborhood=address.neighborhood,
            address_detail=address.address_detail,
        ),
    )


@router.get('/cep', status_code=status.HTTP_200_OK, response_model=CepAddressResponse)
@Logger.io
async def get_address_from_cep(
    cep: str = Query(),
    use_case: GetAddressFromCepUseCase = Depends(GetAddressFromCepUseCase.depends),
) -> CepAddressResponse | Response:
    cep_address = await use_case.lookup(cep=cep)
    if cep_address is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return CepAddressResponse(
        logradouro=cep_address.logradouro,
        complemento=cep_address.complemento,
        bairro=cep_address.bairro,
        cidade=cep_address.cidade,
        uf=cep_address.uf,
    )


@router.post('', status_code=status.HTTP_200_OK)
@Logger.io
async def upsert_enrollment(
    request: UpsertEnrollmentRequest,
    user_id: int = Depends(get_current_user_id),
    use_case: UpsertEnrollmentUseCase = Depends(UpsertEnrollmentUseCase.depends),
) -> Response:
    await use_case.upsert(
        user_id=user_id,
        name=request.name,
        cpf=request.cpf,
        birthday=request.birthday,
        phone=request.phone,
        address=AddressEntity(
            cep=request.address.cep,
            street=request.address.street,
            city=request.address.city,
            state=request.address.state,
            number=request.address.number,
            neighborhood=request.address.neighborhood,
            address_detail=request.address.address_detail,
        ),
    )
    return Response(status_code=status.HTTP_200_OK)
