# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module defines constants for use across the azure-iot-hub-service package
"""

VERSION = "1.0.0b1"
IOTHUB_SERVICE_IDENTIFIER = "azure-iot-hub-service-py"
IOTHUB_API_VERSION = "2021-04-12"
IOT_HUB_PUBLIC_TOKEN_SCOPE = "https://iothubs.azure.net/.default"
IOT_HUB_US_GOVERNMENT_TOKEN_SCOPE = "https://iothubs.azure.us/.default"

# Seconds
DEFAULT_HTTP_TIMEOUT = 100
SAS_TOKEN_TTL = 3600

WILDCARD_ETAG = "*"

DEFAULT_JOB_BLOB_NAME = "devices.txt"
