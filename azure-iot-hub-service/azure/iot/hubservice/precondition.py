# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module decides the If-Match header sent with every mutating request.

IoT Hub applies a conditional write atomically: if the If-Match value is an ETag that no
longer matches the resource, the request is rejected with 412 (Precondition Failed). The
wildcard value "*" applies the write regardless of the current version.
"""

import logging
from enum import Enum
from .constant import WILDCARD_ETAG

logger = logging.getLogger(__name__)

__all__ = [
    "IfMatchPrecondition",
    "normalize_precondition",
    "get_if_match_header_value",
    "get_if_match_header_for",
]


class IfMatchPrecondition(str, Enum):
    """The concurrency policy of a single mutating request.

    IF_MATCH: Only apply the operation if the ETag on the service matches the local one.
    UNCONDITIONAL_IF_MATCH: Apply the operation regardless of the ETag on the service.
    """

    IF_MATCH = "ifMatch"
    UNCONDITIONAL_IF_MATCH = "unconditionalIfMatch"


def _ensure_quoted(etag):
    # Weak validators (W/"...") are already in header form
    if etag.startswith('W/"'):
        return etag
    if len(etag) > 1 and etag[0] == '"' and etag[-1] == '"':
        return etag
    return '"' + etag + '"'


def normalize_precondition(precondition):
    """Return the given value as an :class:`IfMatchPrecondition`.

    :raises: ValueError if the value is not one of the precondition values.
    """
    try:
        return IfMatchPrecondition(precondition)
    except ValueError:
        raise ValueError(
            "precondition must be one of {}, got {!r}".format(
                [p.value for p in IfMatchPrecondition], precondition
            )
        ) from None


def get_if_match_header_value(precondition, etag):
    """Return the If-Match header value for a mutating request.

    NOTE: IF_MATCH with no ETag falls back to the wildcard instead of raising, so that an
    object created locally can be written without fetching it first. A caller that forgets
    to re-fetch will silently overwrite concurrent changes in that case.

    :param precondition: The concurrency policy for the request.
    :type precondition: :class:`IfMatchPrecondition`
    :param str etag: The last known ETag of the resource. May be None or empty.

    :returns: The quoted ETag, or the wildcard "*".
    :rtype: str
    """
    precondition = normalize_precondition(precondition)
    if precondition != IfMatchPrecondition.IF_MATCH:
        logger.debug("Unconditional precondition, sending wildcard If-Match")
        return WILDCARD_ETAG

    if not etag:
        logger.warning(
            "IfMatch precondition requested without an ETag. Falling back to the wildcard; "
            "the write will not be checked for concurrent changes"
        )
        return WILDCARD_ETAG

    logger.debug("IfMatch precondition, sending ETag {}".format(etag))
    return _ensure_quoted(etag)


def get_if_match_header_for(resource, precondition):
    """Return the If-Match header value for writing the given resource.

    :param resource: Any resource snapshot exposing an ``etag`` attribute, or None.
    :param precondition: The concurrency policy for the request.
    :type precondition: :class:`IfMatchPrecondition`
    :rtype: str
    """
    return get_if_match_header_value(precondition, getattr(resource, "etag", None))
