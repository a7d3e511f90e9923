"""
Filtros de logging personalizados para el proyecto.

Evitan que credenciales terminen en los logs (consola o archivo rotativo).
"""
import logging
import re


class SanitizeSecretsFilter(logging.Filter):
    """
    Filtro de logging que remueve claves y tokens de los mensajes.

    Patrones detectados:
    - SECRET_KEY, DB_PASSWORD y EMAIL_HOST_PASSWORD en formato clave=valor
    - Tokens Bearer en headers de autorización
    - Claves genéricas en formato JSON
    """

    PATTERNS = [
        (
            re.compile(r'((?:SECRET_KEY|DB_PASSWORD|EMAIL_HOST_PASSWORD)["\']?\s*[:=]\s*["\']?)([^\s"\',]{6,})'),
            r'\1***REDACTED***'
        ),
        (
            re.compile(r'(Authorization:\s*Bearer\s+)([A-Za-z0-9_.-]{20,})'),
            r'\1***REDACTED***'
        ),
        (
            re.compile(r'(["\'](?:api_key|apiKey|token|secret|password)["\']:\s*["\'])([^"\']{8,})(["\'])'),
            r'\1***REDACTED***\3'
        ),
    ]

    def _sanitize(self, value):
        if not isinstance(value, str):
            return value
        for pattern, replacement in self.PATTERNS:
            value = pattern.sub(replacement, value)
        return value

    def filter(self, record):
        """
        Sanitiza el mensaje y sus argumentos antes de emitirlo.

        Returns:
            bool: Siempre True (no bloqueamos logs, solo los sanitizamos)
        """
        record.msg = self._sanitize(record.msg)

        if record.args:
            if isinstance(record.args, dict):
                record.args = {key: self._sanitize(value) for key, value in record.args.items()}
            elif isinstance(record.args, tuple):
                record.args = tuple(self._sanitize(arg) for arg in record.args)

        return True
