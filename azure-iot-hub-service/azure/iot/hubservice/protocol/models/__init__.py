# coding=utf-8
# --------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

from .identity_models import (
    SymmetricKey,
    X509Thumbprint,
    AuthenticationMechanism,
    DeviceCapabilities,
    DeviceIdentity,
    ModuleIdentity,
)
from .twin_models import TwinProperties, TwinData
from .job_models import ManagedIdentity, JobProperties
from .bulk_models import (
    PropertyContainer,
    ExportImportDevice,
    DeviceRegistryOperationError,
    DeviceRegistryOperationWarning,
    BulkRegistryOperationResult,
)
from .method_models import CloudToDeviceMethodRequest, CloudToDeviceMethodResult
from .enums import (
    AuthenticationType,
    DeviceStatus,
    DeviceConnectionState,
    JobType,
    JobStatus,
    StorageAuthenticationType,
    ImportMode,
)

__all__ = [
    "SymmetricKey",
    "X509Thumbprint",
    "AuthenticationMechanism",
    "DeviceCapabilities",
    "DeviceIdentity",
    "ModuleIdentity",
    "TwinProperties",
    "TwinData",
    "ManagedIdentity",
    "JobProperties",
    "PropertyContainer",
    "ExportImportDevice",
    "DeviceRegistryOperationError",
    "DeviceRegistryOperationWarning",
    "BulkRegistryOperationResult",
    "CloudToDeviceMethodRequest",
    "CloudToDeviceMethodResult",
    "AuthenticationType",
    "DeviceStatus",
    "DeviceConnectionState",
    "JobType",
    "JobStatus",
    "StorageAuthenticationType",
    "ImportMode",
]
