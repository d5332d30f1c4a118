import logging
import xmlrpc.client

from fastapi import APIRouter, HTTPException, Request, Response, status

from blogrpc.config import config
from blogrpc.decoding.request import decode
from blogrpc.domain import exceptions

logger = logging.getLogger(__name__)

router = APIRouter()

XML_MEDIA_TYPE = "text/xml"


def get_bus(request: Request):
    from blogrpc.bootstrap import get_message_bus
    return get_message_bus()


def fault_response(fault: exceptions.DecodeFault) -> Response:
    body = xmlrpc.client.dumps(
        xmlrpc.client.Fault(fault.fault_code, fault.message), methodresponse=True
    )
    return Response(content=body, media_type=XML_MEDIA_TYPE)


@router.post(config.XMLRPC_PATH)
async def xmlrpc_call(request: Request):
    payload = await request.body()
    if len(payload) > config.MAX_PAYLOAD_BYTES:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Request body exceeds {config.MAX_PAYLOAD_BYTES} bytes",
        )

    try:
        cmd = decode(payload)
    except exceptions.DecodeFault as e:
        logger.info(f"XML-RPC fault {e.code}: {e.message}")
        return fault_response(e)

    bus = get_bus(request)
    try:
        result = bus.handle(cmd)
    except exceptions.UnhandledCommand as e:
        raise HTTPException(status_code=status.HTTP_501_NOT_IMPLEMENTED, detail=str(e))

    body = xmlrpc.client.dumps((result,), methodresponse=True, allow_none=True)
    return Response(content=body, media_type=XML_MEDIA_TYPE)
