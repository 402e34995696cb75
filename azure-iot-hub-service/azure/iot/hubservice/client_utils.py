# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""Helpers shared by the resource clients."""

from .precondition import get_if_match_header_value
from .constant import WILDCARD_ETAG
from .protocol.models import ExportImportDevice


def ensure_identifier(name, value):
    """Raise a ValueError if a required identifier is missing, before any request is made"""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError("'{}' must be a non-empty string".format(name))
    return value


def bulk_entries(devices, precondition, plain_mode, conditional_mode):
    """Build the ExportImportDevice entries of a bulk registry request.

    An entry uses the conditional import mode, and carries its ETag, only when the same
    precondition on a single request would have produced an ETag rather than the wildcard.
    """
    if not devices:
        raise ValueError("At least one device identity must be provided")

    entries = []
    for device in devices:
        ensure_identifier("device_id", getattr(device, "device_id", None))
        if precondition is None:
            mode, etag = plain_mode, None
        else:
            header = get_if_match_header_value(precondition, device.etag)
            if header == WILDCARD_ETAG:
                mode, etag = plain_mode, None
            else:
                mode, etag = conditional_mode, device.etag

        entries.append(
            ExportImportDevice(
                id=device.device_id,
                e_tag=etag,
                import_mode=mode,
                status=device.status,
                status_reason=device.status_reason,
                authentication=device.authentication,
                capabilities=device.capabilities,
                device_scope=device.device_scope,
                parent_scopes=device.parent_scopes,
            )
        )
    return entries
