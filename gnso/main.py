# Copyright AGNTCY Contributors (https://github.com/agntcy)
# SPDX-License-Identifier: Apache-2.0

import logging
import os
from typing import Optional

import requests
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from gnso.connectors.nso_connector_rest import NSORestconfError
from gnso.gateway.exceptions import GatewayError
from gnso.gateway.models import (
    EditConfigRequest,
    ExecOperationRequest,
    GetConfigRequest,
    GetDevicesRequest,
    GetDevicesResponse,
    QueryRequest,
    Response,
)
from gnso.gateway.nso_service import NSOService, build_service

from config.config import GNSO_HOST, PORT, TLS_CERT_FILE, TLS_ENABLED, TLS_KEY_FILE
from config.logging_config import setup_logging

# -------------------- Logging --------------------
setup_logging()
logger = logging.getLogger("gnso.main")


def _error(status_code: int, code: str, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"code": code, "detail": detail})


def create_app(service: Optional[NSOService] = None) -> FastAPI:
    """
    Build the FastAPI app exposing the NSO RPC operations.

    The endpoints are plain ``def`` functions, so FastAPI runs each call in
    its thread pool and the single blocking NSO request never stalls the loop.
    """
    service = service or build_service()
    app = FastAPI(title="gnso")

    # -------------------- Error mapping --------------------
    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError):
        return _error(exc.status_code, exc.code, str(exc))

    @app.exception_handler(NSORestconfError)
    async def nso_error_handler(request: Request, exc: NSORestconfError):
        return _error(502, "UNKNOWN", str(exc))

    @app.exception_handler(requests.RequestException)
    async def transport_error_handler(request: Request, exc: requests.RequestException):
        return _error(503, "UNAVAILABLE", str(exc))

    # -------------------- RPC Endpoints --------------------
    @app.post("/rpc/GetDevices", response_model=GetDevicesResponse)
    def get_devices(request: GetDevicesRequest):
        return service.get_devices(request)

    @app.post("/rpc/GetConfig", response_model=Response)
    def get_config(request: GetConfigRequest):
        return service.get_config(request)

    @app.post("/rpc/EditConfig", response_model=Response)
    def edit_config(request: EditConfigRequest):
        return service.edit_config(request)

    @app.post("/rpc/Query", response_model=Response)
    def query(request: QueryRequest):
        return service.query(request)

    @app.post("/rpc/ExecOperation", response_model=Response)
    def exec_operation(request: ExecOperationRequest):
        return service.exec_operation(request)

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    return app


def ssl_options(enabled: bool, certfile: str, keyfile: str) -> dict:
    """
    Return the uvicorn TLS keyword arguments.

    Exits the process when TLS is enabled but the cert or key is missing.
    """
    if not enabled:
        logger.warning("TLS disabled by TLS_ENABLED, serving plain HTTP")
        return {}
    missing = [path for path in (certfile, keyfile) if not os.path.isfile(path)]
    if missing:
        logger.error("TLS material not found: %s", ", ".join(missing))
        raise SystemExit(1)
    return {"ssl_certfile": certfile, "ssl_keyfile": keyfile}


def main() -> None:
    options = ssl_options(TLS_ENABLED, TLS_CERT_FILE, TLS_KEY_FILE)
    logger.info("Starting server on port %s", PORT)
    uvicorn.run(create_app(), host=GNSO_HOST, port=PORT, **options)


# -------------------- Main --------------------
if __name__ == "__main__":
    main()
