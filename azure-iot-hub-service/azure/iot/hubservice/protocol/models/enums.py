# coding=utf-8
# --------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

from enum import Enum


class AuthenticationType(str, Enum):

    sas = "sas"
    self_signed = "selfSigned"
    certificate_authority = "certificateAuthority"
    none = "none"


class DeviceStatus(str, Enum):

    enabled = "enabled"
    disabled = "disabled"


class DeviceConnectionState(str, Enum):

    disconnected = "Disconnected"
    connected = "Connected"


class JobType(str, Enum):

    unknown = "unknown"
    export = "export"
    import_enum = "import"


class JobStatus(str, Enum):

    unknown = "unknown"
    enqueued = "enqueued"
    running = "running"
    completed = "completed"
    failed = "failed"
    cancelled = "cancelled"
    scheduled = "scheduled"
    queued = "queued"


class StorageAuthenticationType(str, Enum):

    key_based = "keyBased"
    identity_based = "identityBased"


class ImportMode(str, Enum):

    create = "create"
    update = "update"
    update_if_match_etag = "updateIfMatchETag"
    delete = "delete"
    delete_if_match_etag = "deleteIfMatchETag"
    update_twin = "updateTwin"
    update_twin_if_match_etag = "updateTwinIfMatchETag"
