# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""Define Azure IoT Hub service user-facing exceptions"""

import functools
import logging
from msrest.exceptions import HttpOperationError

logger = logging.getLogger(__name__)


class IoTHubServiceError(Exception):
    """Represents a failure reported by IoT Hub

    :ivar int status_code: The HTTP status code returned by the service, if any
    :ivar str message: The error message, including the service response body when present
    """

    def __init__(self, message, status_code=None):
        super(IoTHubServiceError, self).__init__(message)
        self.message = message
        self.status_code = status_code


class ArgumentError(IoTHubServiceError):
    """
    Service returned 400
    """

    pass


class UnauthorizedError(IoTHubServiceError):
    """
    Service returned 401
    """

    pass


class QuotaExceededError(IoTHubServiceError):
    """
    Service returned 403
    """

    pass


class ResourceNotFoundError(IoTHubServiceError):
    """
    Service returned 404
    """

    pass


class ResourceAlreadyExistsError(IoTHubServiceError):
    """
    Service returned 409
    """

    pass


class PreconditionFailedError(IoTHubServiceError):
    """
    Service returned 412. The ETag sent with a conditional write is stale.

    This is never retried automatically: fetch the resource again and re-apply the change.
    """

    pass


class MessageTooLargeError(IoTHubServiceError):
    """
    Service returned 413
    """

    pass


class ThrottlingError(IoTHubServiceError):
    """
    Service returned 429
    """

    pass


class InternalServiceError(IoTHubServiceError):
    """
    Service returned 500
    """

    pass


class ServiceUnavailableError(IoTHubServiceError):
    """
    Service returned 503
    """

    pass


_status_code_to_error = {
    400: ArgumentError,
    401: UnauthorizedError,
    403: QuotaExceededError,
    404: ResourceNotFoundError,
    409: ResourceAlreadyExistsError,
    412: PreconditionFailedError,
    413: MessageTooLargeError,
    429: ThrottlingError,
    500: InternalServiceError,
    503: ServiceUnavailableError,
}


def translate_http_operation_error(error):
    """Return the IoTHubServiceError matching the status code of an msrest HttpOperationError

    :param error: The error raised by the protocol layer
    :type error: :class:`msrest.exceptions.HttpOperationError`
    :rtype: :class:`IoTHubServiceError`
    """
    response = getattr(error, "response", None)
    status_code = getattr(response, "status_code", None)
    message = str(error.message) if getattr(error, "message", None) else str(error)
    body = getattr(response, "text", None)
    if body:
        message = "{} ({})".format(message, body)
    error_class = _status_code_to_error.get(status_code, IoTHubServiceError)
    return error_class(message, status_code=status_code)


def handle_service_errors(fn):
    """Apply as a decorator to translate msrest HttpOperationErrors raised from a client
    method into IoTHubServiceErrors.
    """

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except HttpOperationError as e:
            new_err = translate_http_operation_error(e)
            logger.info(
                "{} failed with status {}".format(fn.__name__, new_err.status_code)
            )
            raise new_err from e

    return wrapper
