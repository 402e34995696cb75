# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""Azure IoT Hub Service Library

This library provides service clients and associated models for managing the identity
registry of an Azure IoT Hub: device and module identities, twins, direct methods, and
import and export jobs.
"""

from .iothub_service_client import IoTHubServiceClient
from .devices_client import DevicesClient
from .modules_client import ModulesClient
from .jobs_client import JobsClient
from .precondition import IfMatchPrecondition
from .constant import IOT_HUB_PUBLIC_TOKEN_SCOPE, IOT_HUB_US_GOVERNMENT_TOKEN_SCOPE

__all__ = [
    "IoTHubServiceClient",
    "DevicesClient",
    "ModulesClient",
    "JobsClient",
    "IfMatchPrecondition",
    "IOT_HUB_PUBLIC_TOKEN_SCOPE",
    "IOT_HUB_US_GOVERNMENT_TOKEN_SCOPE",
]
