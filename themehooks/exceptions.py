"""
Custom Exception Classes for Theme Hooks

This module defines custom exceptions for better error handling and
consistent error responses across the application.

Registration-time errors (duplicates, frozen registry, unknown extension)
abort startup. Request-time errors surface through the exception handlers
as standard JSON error responses.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from fastapi import status


class ErrorCode(str, Enum):
    """Machine-readable error codes returned in the `error_code` field."""

    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    ROUTE_NOT_FOUND = "RESOURCE_ROUTE_NOT_FOUND"
    TEMPLATE_NOT_FOUND = "RESOURCE_TEMPLATE_NOT_FOUND"
    EXTENSION_NOT_FOUND = "RESOURCE_EXTENSION_NOT_FOUND"
    DUPLICATE_REGISTRATION = "REGISTRY_DUPLICATE"
    DUPLICATE_HANDLER = "REGISTRY_DUPLICATE_HANDLER"
    DUPLICATE_TEMPLATE = "REGISTRY_DUPLICATE_TEMPLATE"
    DUPLICATE_ROUTE = "REGISTRY_DUPLICATE_ROUTE"
    REGISTRY_FROZEN = "REGISTRY_FROZEN"
    UNDECLARED_VARIABLE = "THEME_UNDECLARED_VARIABLE"


class CMSException(Exception):
    """Base exception class for all Theme Hooks errors"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code
        super().__init__(self.message)


# ============================================================================
# Resource Not Found Exceptions
# ============================================================================


class ResourceNotFoundError(CMSException):
    """Base class for resource not found errors"""

    def __init__(
        self,
        resource_type: str,
        resource_id: Any | None = None,
        error_code: ErrorCode = ErrorCode.RESOURCE_NOT_FOUND,
    ):
        message = f"{resource_type} not found"
        if resource_id is not None:
            message = f"{resource_type} '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details={"resource_type": resource_type, "resource_id": resource_id},
            error_code=error_code,
        )


class UnknownRouteError(ResourceNotFoundError):
    """Raised when a route id or path is not registered"""

    def __init__(self, route_id: str):
        super().__init__(resource_type="Route", resource_id=route_id, error_code=ErrorCode.ROUTE_NOT_FOUND)


class ExtensionNotFoundError(ResourceNotFoundError):
    """Raised when an enabled extension is not available"""

    def __init__(self, name: str):
        super().__init__(resource_type="Extension", resource_id=name, error_code=ErrorCode.EXTENSION_NOT_FOUND)


class UnknownTemplateError(CMSException):
    """Raised when a render descriptor names a template no theme hook declared"""

    def __init__(self, template_name: str):
        super().__init__(
            message=f"Template '{template_name}' is not declared by any theme hook",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={"template_name": template_name},
            error_code=ErrorCode.TEMPLATE_NOT_FOUND,
        )


class UndeclaredVariableError(CMSException):
    """Raised when a render descriptor passes variables missing from the template schema"""

    def __init__(self, template_name: str, variables: list[str]):
        super().__init__(
            message=f"Template '{template_name}' does not declare variables: {', '.join(variables)}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={"template_name": template_name, "variables": variables},
            error_code=ErrorCode.UNDECLARED_VARIABLE,
        )


# ============================================================================
# Registration Exceptions
# ============================================================================


class DuplicateRegistrationError(CMSException):
    """Raised when the same thing is registered twice at startup"""

    def __init__(
        self,
        resource_type: str,
        key: str,
        value: Any,
        error_code: ErrorCode = ErrorCode.DUPLICATE_REGISTRATION,
    ):
        super().__init__(
            message=f"{resource_type} '{value}' is already registered for {key}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={"resource_type": resource_type, "key": key, "value": str(value)},
            error_code=error_code,
        )


class DuplicateHandlerError(DuplicateRegistrationError):
    """Raised when one handler is registered twice for the same hook"""

    def __init__(self, hook_name: str, handler: Any):
        name = getattr(handler, "__qualname__", repr(handler))
        super().__init__(
            resource_type="Handler",
            key=f"hook '{hook_name}'",
            value=name,
            error_code=ErrorCode.DUPLICATE_HANDLER,
        )
        self.hook_name = hook_name


class DuplicateTemplateError(DuplicateRegistrationError):
    """Raised when two theme hooks declare the same template"""

    def __init__(self, template_name: str):
        super().__init__(
            resource_type="Template",
            key="the theme registry",
            value=template_name,
            error_code=ErrorCode.DUPLICATE_TEMPLATE,
        )


class DuplicateRouteError(DuplicateRegistrationError):
    """Raised when a route id or path is registered twice"""

    def __init__(self, field: str, value: str):
        super().__init__(
            resource_type="Route",
            key=field,
            value=value,
            error_code=ErrorCode.DUPLICATE_ROUTE,
        )


class RegistryFrozenError(CMSException):
    """Raised when registering a hook after startup has completed"""

    def __init__(self, hook_name: str):
        super().__init__(
            message=f"Cannot register a handler for '{hook_name}': the hook registry is frozen",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={"hook_name": hook_name},
            error_code=ErrorCode.REGISTRY_FROZEN,
        )
