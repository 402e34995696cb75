# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains user-facing asynchronous clients for the
Azure IoT Hub service library.

Each coroutine runs the matching synchronous operation on the default executor, so the
If-Match header is computed exactly as on the synchronous clients. Cancelling an awaiting
call stops waiting for the result; a request already sent may still be applied by IoT Hub.
"""

import logging
from .. import async_adapter
from ..precondition import IfMatchPrecondition
from ..iothub_service_client import IoTHubServiceClient as SyncIoTHubServiceClient

logger = logging.getLogger(__name__)

UNCONDITIONAL = IfMatchPrecondition.UNCONDITIONAL_IF_MATCH


class DevicesClient(object):
    """Asynchronous convenience APIs for the devices of the IoT Hub identity registry."""

    def __init__(self, sync_client):
        self._sync_client = sync_client

    async def get_identity(self, device_id):
        """Retrieves a device identity from IoT Hub.

        :param str device_id: The name (Id) of the device.
        :returns: The DeviceIdentity object, including its current etag.
        """
        get_identity_async = async_adapter.emulate_async(self._sync_client.get_identity)
        return await get_identity_async(device_id)

    async def get_identities(self, max_count=None):
        """Retrieves multiple device identities from IoT Hub."""
        get_identities_async = async_adapter.emulate_async(self._sync_client.get_identities)
        return await get_identities_async(max_count)

    async def create_or_update_identity(self, device_identity, precondition=UNCONDITIONAL):
        """Creates or updates a device identity on IoT Hub.

        :param device_identity: The device identity to write.
        :type device_identity: :class:`azure.iot.hubservice.models.DeviceIdentity`
        :param precondition: Default value: UNCONDITIONAL_IF_MATCH
        :type precondition: :class:`azure.iot.hubservice.models.IfMatchPrecondition`
        :returns: The DeviceIdentity object as written, with its new etag.
        """
        write_async = async_adapter.emulate_async(self._sync_client.create_or_update_identity)
        return await write_async(device_identity, precondition)

    async def delete_identity(self, device_identity_or_id, precondition=UNCONDITIONAL):
        """Deletes a device identity from IoT Hub."""
        delete_async = async_adapter.emulate_async(self._sync_client.delete_identity)
        return await delete_async(device_identity_or_id, precondition)

    async def create_identities(self, devices):
        create_async = async_adapter.emulate_async(self._sync_client.create_identities)
        return await create_async(devices)

    async def update_identities(self, devices, precondition=UNCONDITIONAL):
        update_async = async_adapter.emulate_async(self._sync_client.update_identities)
        return await update_async(devices, precondition)

    async def delete_identities(self, devices, precondition=UNCONDITIONAL):
        delete_async = async_adapter.emulate_async(self._sync_client.delete_identities)
        return await delete_async(devices, precondition)

    async def get_twin(self, device_id):
        """Gets a device twin."""
        get_twin_async = async_adapter.emulate_async(self._sync_client.get_twin)
        return await get_twin_async(device_id)

    async def update_twin(self, twin, precondition=UNCONDITIONAL):
        """Patches the tags and desired properties of a device twin."""
        update_twin_async = async_adapter.emulate_async(self._sync_client.update_twin)
        return await update_twin_async(twin, precondition)

    async def replace_twin(self, twin, precondition=UNCONDITIONAL):
        """Replaces the tags and desired properties of a device twin."""
        replace_twin_async = async_adapter.emulate_async(self._sync_client.replace_twin)
        return await replace_twin_async(twin, precondition)

    async def invoke_method(self, device_id, direct_method_request):
        """Invokes a direct method on a device."""
        invoke_method_async = async_adapter.emulate_async(self._sync_client.invoke_method)
        return await invoke_method_async(device_id, direct_method_request)


class ModulesClient(object):
    """Asynchronous convenience APIs for the modules of the IoT Hub identity registry."""

    def __init__(self, sync_client):
        self._sync_client = sync_client

    async def get_identity(self, device_id, module_id):
        """Retrieves a module identity from IoT Hub."""
        get_identity_async = async_adapter.emulate_async(self._sync_client.get_identity)
        return await get_identity_async(device_id, module_id)

    async def get_identities(self, device_id):
        """Retrieves all the module identities on a device."""
        get_identities_async = async_adapter.emulate_async(self._sync_client.get_identities)
        return await get_identities_async(device_id)

    async def create_or_update_identity(self, module_identity, precondition=UNCONDITIONAL):
        """Creates or updates a module identity on IoT Hub."""
        write_async = async_adapter.emulate_async(self._sync_client.create_or_update_identity)
        return await write_async(module_identity, precondition)

    async def delete_identity(
        self, module_identity_or_device_id, module_id=None, precondition=UNCONDITIONAL
    ):
        """Deletes a module identity from IoT Hub."""
        delete_async = async_adapter.emulate_async(self._sync_client.delete_identity)
        return await delete_async(module_identity_or_device_id, module_id, precondition)

    async def get_twin(self, device_id, module_id):
        get_twin_async = async_adapter.emulate_async(self._sync_client.get_twin)
        return await get_twin_async(device_id, module_id)

    async def update_twin(self, twin, precondition=UNCONDITIONAL):
        update_twin_async = async_adapter.emulate_async(self._sync_client.update_twin)
        return await update_twin_async(twin, precondition)

    async def replace_twin(self, twin, precondition=UNCONDITIONAL):
        replace_twin_async = async_adapter.emulate_async(self._sync_client.replace_twin)
        return await replace_twin_async(twin, precondition)

    async def invoke_method(self, device_id, module_id, direct_method_request):
        invoke_method_async = async_adapter.emulate_async(self._sync_client.invoke_method)
        return await invoke_method_async(device_id, module_id, direct_method_request)


class JobsClient(object):
    """Asynchronous convenience APIs for import and export jobs."""

    def __init__(self, sync_client):
        self._sync_client = sync_client

    async def create_export_devices_job(self, output_blob_container_uri, exclude_keys, options=None):
        """Creates a job that exports the device registry to a blob container."""
        create_async = async_adapter.emulate_async(self._sync_client.create_export_devices_job)
        return await create_async(output_blob_container_uri, exclude_keys, options)

    async def create_import_devices_job(
        self, import_blob_container_uri, output_blob_container_uri, options=None
    ):
        """Creates a job that imports device identities from a blob container."""
        create_async = async_adapter.emulate_async(self._sync_client.create_import_devices_job)
        return await create_async(import_blob_container_uri, output_blob_container_uri, options)

    async def get_import_export_job(self, job_id):
        get_job_async = async_adapter.emulate_async(self._sync_client.get_import_export_job)
        return await get_job_async(job_id)

    async def get_import_export_jobs(self):
        get_jobs_async = async_adapter.emulate_async(self._sync_client.get_import_export_jobs)
        return await get_jobs_async()

    async def cancel_import_export_job(self, job_id):
        cancel_async = async_adapter.emulate_async(self._sync_client.cancel_import_export_job)
        return await cancel_async(job_id)


class IoTHubServiceClient(object):
    """The asynchronous entry point for managing the identity registry of an IoT Hub.

    :ivar devices: Device identities, device twins and device direct methods.
    :vartype devices: :class:`azure.iot.hubservice.aio.DevicesClient`
    :ivar modules: Module identities, module twins and module direct methods.
    :vartype modules: :class:`azure.iot.hubservice.aio.ModulesClient`
    :ivar jobs: Import and export jobs.
    :vartype jobs: :class:`azure.iot.hubservice.aio.JobsClient`
    """

    def __init__(self, sync_service_client):
        """Initializer for an asynchronous IoTHubServiceClient.

        Users should not call this directly. Rather, they should use the
        from_connection_string() or from_token_credential() factory methods.

        :param sync_service_client: The synchronous client doing the work.
        :type sync_service_client: :class:`azure.iot.hubservice.IoTHubServiceClient`
        """
        self._sync_service_client = sync_service_client
        self.devices = DevicesClient(sync_service_client.devices)
        self.modules = ModulesClient(sync_service_client.modules)
        self.jobs = JobsClient(sync_service_client.jobs)

    @classmethod
    def from_connection_string(cls, connection_string, **kwargs):
        """Creates the client from an IoT Hub connection string.

        Accepts the same options as :meth:`azure.iot.hubservice.IoTHubServiceClient.from_connection_string`.

        :rtype: :class:`azure.iot.hubservice.aio.IoTHubServiceClient`
        """
        return cls(SyncIoTHubServiceClient.from_connection_string(connection_string, **kwargs))

    @classmethod
    def from_token_credential(cls, url, token_credential, **kwargs):
        """Creates the client from the host name of the IoT Hub and an Azure token credential.

        Accepts the same options as :meth:`azure.iot.hubservice.IoTHubServiceClient.from_token_credential`.

        :rtype: :class:`azure.iot.hubservice.aio.IoTHubServiceClient`
        """
        return cls(SyncIoTHubServiceClient.from_token_credential(url, token_credential, **kwargs))
