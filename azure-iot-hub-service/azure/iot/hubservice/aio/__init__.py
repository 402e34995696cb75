# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""Azure IoT Hub Service Library - Asynchronous

This library provides asynchronous clients for managing the identity registry of an
Azure IoT Hub.
"""

from .async_clients import IoTHubServiceClient, DevicesClient, ModulesClient, JobsClient

__all__ = ["IoTHubServiceClient", "DevicesClient", "ModulesClient", "JobsClient"]
