"""
Excepciones base y manejador de errores DRF compartidos por las apps.
"""
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.views import exception_handler


class BusinessLogicError(APIException):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_detail = "Regla de negocio no satisfecha."
    default_code = "BUSINESS_LOGIC_ERROR"

    def __init__(self, detail=None, *, internal_code=None, extra=None):
        # El status HTTP lo fija cada subclase; aquí solo se arma el payload.
        payload = {"detail": detail or self.default_detail}
        if internal_code:
            payload["code"] = internal_code
        if extra:
            payload["meta"] = extra
        super().__init__(payload, self.default_code)

    @property
    def message(self) -> str:
        return str(self.detail["detail"])

    def __str__(self):
        return self.message


def drf_exception_handler(exc, context):
    """
    Normaliza errores según la convención del proyecto (400/401/403/404/409/422/5xx).
    """
    response = exception_handler(exc, context)

    if response is None:
        # Error inesperado: DRF lo deja propagar como 500
        return None

    data = response.data
    default_detail = data.get("detail") if isinstance(data, dict) else None
    code = response.status_code

    normalized = {
        "status_code": code,
        "error": _map_http_to_code(code),
        "detail": default_detail or "Error",
    }
    if isinstance(data, dict):
        if "code" in data:
            normalized["code"] = data.get("code")
        if "meta" in data:
            normalized["meta"] = data.get("meta")
        # Adjunta errores de validación detallados si existen
        extra = {k: v for k, v in data.items() if k not in {"detail", "code", "meta"}}
        if extra:
            normalized["errors"] = extra
    elif isinstance(data, list):
        normalized["errors"] = data

    response.data = normalized
    return response


def _map_http_to_code(code: int) -> str:
    return {
        status.HTTP_400_BAD_REQUEST: "VALIDATION_ERROR",
        status.HTTP_401_UNAUTHORIZED: "NOT_AUTHENTICATED",
        status.HTTP_403_FORBIDDEN: "NOT_AUTHORIZED",
        status.HTTP_404_NOT_FOUND: "NOT_FOUND",
        status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
        status.HTTP_409_CONFLICT: "CONFLICT",
        status.HTTP_422_UNPROCESSABLE_ENTITY: "BUSINESS_RULE_VIOLATION",
    }.get(code, "SERVER_ERROR")
