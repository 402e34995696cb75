# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import pytest


# These fixtures are shared
from .common_fixtures import (  # noqa: F401
    service_client,
    mock_devices_operations,
    mock_modules_operations,
    mock_jobs_operations,
    mock_bulk_registry_operations,
    mock_send,
)
