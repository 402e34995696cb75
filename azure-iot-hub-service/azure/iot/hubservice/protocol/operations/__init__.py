# coding=utf-8
# --------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

from .devices_operations import DevicesOperations
from .modules_operations import ModulesOperations
from .jobs_operations import JobsOperations
from .bulk_registry_operations import BulkRegistryOperations

__all__ = ["DevicesOperations", "ModulesOperations", "JobsOperations", "BulkRegistryOperations"]
